"""Pydantic data models shared by the fetch, render and deliver steps."""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, TypeAdapter


class TopicRecord(BaseModel):
    """One entry of the hot list. Upstream fields other than ``word`` are dropped."""

    word: str = Field(..., description="Display text of the trending topic")

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "coerce_numbers_to_str": True,
    }


HOT_LIST_ADAPTER: TypeAdapter[List[TopicRecord]] = TypeAdapter(List[TopicRecord])


class StepResult(BaseModel):
    """Outcome of a single I/O step: ``ok`` with a ``value``, or failed with a ``reason``."""

    ok: bool
    value: Any = None
    reason: str | None = None

    model_config = {
        "frozen": True,
    }

    @classmethod
    def success(cls, value: Any = None) -> "StepResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "StepResult":
        return cls(ok=False, reason=reason)
