"""Run configuration, read once from the environment (and ``.env``)."""
from __future__ import annotations

import logging
import os
from typing import Mapping

from pydantic import BaseModel, Field

from fetchers.tianapi_hot_list import DEFAULT_TIANAPI_URL

logger = logging.getLogger(__name__)

REQUIRED_ENV_VARS = ("WXPUSHER_APP_TOKEN", "WXPUSHER_UID", "TIANAPI_KEY")


class ConfigError(RuntimeError):
    """Raised when a required setting is missing; the run must not start."""


def _int_setting(raw: str | None, default: int, low: int, high: int | None = None) -> int:
    """Parse *raw* as an int in ``[low, high]``; anything else yields *default*."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if value < low or (high is not None and value > high):
        return default
    return value


class PushConfig(BaseModel):
    """Immutable settings for one push run."""

    wxpusher_app_token: str = Field(..., min_length=1)
    wxpusher_uid: str = Field(..., min_length=1)
    tianapi_key: str = Field(..., min_length=1)
    tianapi_url: str = DEFAULT_TIANAPI_URL
    push_hour: int = Field(9, ge=0, le=23, description="Informational; the cron owns scheduling")
    push_minute: int = Field(0, ge=0, le=59, description="Informational; the cron owns scheduling")
    hot_list_count: int = Field(10, ge=1)

    model_config = {
        "frozen": True,
    }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PushConfig":
        """Build the config from *environ* (defaults to ``os.environ``).

        Raises
        ------
        ConfigError
            If ``WXPUSHER_APP_TOKEN``, ``WXPUSHER_UID`` or ``TIANAPI_KEY`` is unset or empty.
        """
        env = os.environ if environ is None else environ

        for name in REQUIRED_ENV_VARS:
            if not env.get(name):
                raise ConfigError(f"Missing required environment variable: {name}")

        return cls(
            wxpusher_app_token=env["WXPUSHER_APP_TOKEN"],
            wxpusher_uid=env["WXPUSHER_UID"],
            tianapi_key=env["TIANAPI_KEY"],
            tianapi_url=env.get("TIANAPI_URL") or DEFAULT_TIANAPI_URL,
            push_hour=_int_setting(env.get("PUSH_HOUR"), 9, 0, 23),
            push_minute=_int_setting(env.get("PUSH_MINUTE"), 0, 0, 59),
            hot_list_count=_int_setting(env.get("HOT_LIST_COUNT"), 10, 1),
        )

    def log_summary(self) -> None:
        """Log the non-secret settings."""
        logger.info("⚙️ Push configuration:")
        logger.info("  • Push time: %d:%02d", self.push_hour, self.push_minute)
        logger.info("  • Hot topics per push: %d", self.hot_list_count)
        logger.info("  • API URL: %s", self.tianapi_url)
