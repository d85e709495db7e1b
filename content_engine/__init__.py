"""Hot-list content engine.

Lightweight package that turns the ranked WeChat hot-topic list into the HTML
fragment pushed through WxPusher.
"""

from .formatter import FALLBACK_CONTENT, format_hot_list_content, format_timestamp, rank_marker
from .models import StepResult, TopicRecord

__all__ = [
    "FALLBACK_CONTENT",
    "StepResult",
    "TopicRecord",
    "format_hot_list_content",
    "format_timestamp",
    "rank_marker",
]

__version__ = "0.1.0"
