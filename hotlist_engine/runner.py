"""PushRunner - fetch the hot list, render it, deliver it. One pass, no retries."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

import httpx

from content_engine.formatter import format_hot_list_content
from content_engine.models import TopicRecord
from fetchers import tianapi_hot_list
from notifiers import wxpusher_sender
from notifiers.wxpusher_sender import DEFAULT_SUMMARY

from .config import PushConfig

logger = logging.getLogger(__name__)


class PushRunner:
    """Runs Fetching -> Rendering -> Delivering once for a given config."""

    def __init__(
        self,
        config: PushConfig,
        client: Optional[httpx.Client] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config
        self.client = client
        self.clock = clock

    def _now(self) -> datetime:
        return self.clock() if self.clock is not None else datetime.now(timezone.utc)

    def fetch_hot_list(self, client: Optional[httpx.Client] = None) -> List[TopicRecord]:
        """Return the hot list, or an empty list when the fetch step fails."""
        result = tianapi_hot_list.fetch_hot_list(
            self.config.tianapi_url,
            self.config.tianapi_key,
            client=client or self.client,
            timeout=tianapi_hot_list.REQUEST_TIMEOUT,
        )
        if not result.ok:
            logger.warning("⚠️ Continuing with an empty hot list (%s)", result.reason)
            return []
        return result.value

    def format_content(self, hot_list: List[TopicRecord]) -> str:
        return format_hot_list_content(hot_list, self.config.hot_list_count, now=self._now())

    def deliver(
        self,
        content: str,
        summary: str = DEFAULT_SUMMARY,
        client: Optional[httpx.Client] = None,
    ) -> bool:
        result = wxpusher_sender.send_message(
            self.config.wxpusher_app_token,
            self.config.wxpusher_uid,
            content,
            summary=summary,
            client=client or self.client,
            timeout=wxpusher_sender.REQUEST_TIMEOUT,
        )
        return result.ok

    def _run_steps(self, client: httpx.Client) -> bool:
        hot_list = self.fetch_hot_list(client)
        content = self.format_content(hot_list)
        return self.deliver(content, client=client)

    def run(self) -> bool:
        """Execute the push task; the return value is the delivery outcome only."""
        logger.info("🚀 Starting hot-list push task")

        if self.client is None:
            with httpx.Client() as client:
                success = self._run_steps(client)
        else:
            success = self._run_steps(self.client)

        if success:
            logger.info("🎉 Hot-list push task finished")
        else:
            logger.error("❌ Hot-list push task failed")
        return success

    def test_push(self) -> bool:
        """Same as :meth:`run`, announced as a test push in the log."""
        logger.info("🧪 Running test push")
        return self.run()
