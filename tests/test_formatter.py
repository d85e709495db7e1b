from datetime import datetime, timezone

from content_engine.formatter import (
    FALLBACK_CONTENT,
    format_hot_list_content,
    format_timestamp,
    rank_marker,
)
from content_engine.models import TopicRecord

FIXED_NOW = datetime(2024, 1, 5, 1, 0, 30, tzinfo=timezone.utc)  # 09:00 in Shanghai


def _topics(*words: str) -> list[TopicRecord]:
    return [TopicRecord(word=w) for w in words]


def test_rank_marker_medals_then_numbers() -> None:
    assert rank_marker(1) == "🥇"
    assert rank_marker(2) == "🥈"
    assert rank_marker(3) == "🥉"
    assert rank_marker(4) == "4."
    assert rank_marker(10) == "10."


def test_timestamp_is_shanghai_minute_precision() -> None:
    assert format_timestamp(FIXED_NOW) == "2024/01/05 09:00"


def test_renders_exactly_count_entries_in_rank_order() -> None:
    words = [f"topic-{i}" for i in range(1, 13)]
    html = format_hot_list_content(_topics(*words), 10, now=FIXED_NOW)

    assert html.startswith("<h2>📱 微信热搜榜 (2024/01/05 09:00)</h2><br/>")
    assert html.endswith("<br/><p><small>数据来源：天行API</small></p>")
    assert html.count("<p><strong>") == 10
    assert "<p><strong>🥇 topic-1</strong></p>" in html
    assert "<p><strong>🥈 topic-2</strong></p>" in html
    assert "<p><strong>🥉 topic-3</strong></p>" in html
    assert "<p><strong>4. topic-4</strong></p>" in html
    assert "<p><strong>10. topic-10</strong></p>" in html
    assert "topic-11" not in html
    positions = [html.index(f"topic-{i}</strong>") for i in range(1, 11)]
    assert positions == sorted(positions)


def test_short_list_is_not_padded() -> None:
    html = format_hot_list_content(_topics("A", "B"), 10, now=FIXED_NOW)
    assert html.count("<p><strong>") == 2
    assert "🥉" not in html


def test_empty_or_missing_list_gives_fallback() -> None:
    assert format_hot_list_content([], 10, now=FIXED_NOW) == FALLBACK_CONTENT
    assert format_hot_list_content(None, 3) == FALLBACK_CONTENT
    assert FALLBACK_CONTENT == "<h2>📱 微信热搜榜</h2><p>暂无热搜数据</p>"


def test_deterministic_for_fixed_clock() -> None:
    topics = _topics("A", "B", "C", "D")
    assert format_hot_list_content(topics, 3, now=FIXED_NOW) == format_hot_list_content(topics, 3, now=FIXED_NOW)


def test_topic_text_is_escaped() -> None:
    html = format_hot_list_content(_topics("<b>A & B</b>"), 10, now=FIXED_NOW)
    assert "🥇 &lt;b&gt;A &amp; B&lt;/b&gt;" in html


def test_helpers_exported_from_package() -> None:
    import content_engine

    assert content_engine.format_timestamp is format_timestamp
    assert "format_timestamp" in content_engine.__all__
