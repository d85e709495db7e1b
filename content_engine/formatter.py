"""Render the hot list into the HTML fragment sent as the push body."""
from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Sequence
from zoneinfo import ZoneInfo

from .models import TopicRecord

SHANGHAI_TZ = ZoneInfo("Asia/Shanghai")

HEADER_TITLE = "📱 微信热搜榜"
FALLBACK_CONTENT = f"<h2>{HEADER_TITLE}</h2><p>暂无热搜数据</p>"
SOURCE_FOOTER = "<br/><p><small>数据来源：天行API</small></p>"

RANK_MEDALS = {
    1: "🥇",
    2: "🥈",
    3: "🥉",
}


def rank_marker(rank: int) -> str:
    """Return the medal glyph for ranks 1-3, otherwise ``"<rank>."``."""
    return RANK_MEDALS.get(rank, f"{rank}.")


def format_timestamp(now: datetime) -> str:
    """Format *now* in Shanghai time as ``YYYY/MM/DD HH:MM``."""
    return now.astimezone(SHANGHAI_TZ).strftime("%Y/%m/%d %H:%M")


def format_hot_list_content(
    hot_list: Sequence[TopicRecord] | None,
    count: int,
    now: datetime | None = None,
) -> str:
    """Build the HTML push body from the first *count* topics of *hot_list*.

    Parameters
    ----------
    hot_list:
        Ranked topics, index 0 being rank 1. ``None`` or empty yields
        :data:`FALLBACK_CONTENT`.
    count:
        Maximum number of topics to render; shorter lists are not padded.
    now:
        Clock reading embedded in the header. Defaults to the current UTC time.
    """
    if not hot_list:
        return FALLBACK_CONTENT

    if now is None:
        now = datetime.now(timezone.utc)

    parts = [f"<h2>{HEADER_TITLE} ({format_timestamp(now)})</h2><br/>"]
    for index, topic in enumerate(hot_list[: max(count, 0)]):
        word = html.escape(topic.word, quote=False)
        parts.append(f"<p><strong>{rank_marker(index + 1)} {word}</strong></p>")
    parts.append(SOURCE_FOOTER)

    return "".join(parts)
