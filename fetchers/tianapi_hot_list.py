from __future__ import annotations
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from content_engine.models import HOT_LIST_ADAPTER, StepResult

logger = logging.getLogger(__name__)

DEFAULT_TIANAPI_URL = "https://apis.tianapi.com/wxhottopic/index"
REQUEST_TIMEOUT = 10.0  # seconds
SUCCESS_CODE = 200


def _extract_list(payload: Any) -> Any:
    """Return ``payload['result']['list']`` or raise ``ValueError`` on a wrong shape."""
    if not isinstance(payload, dict):
        raise ValueError("response body is not a JSON object")
    result = payload.get("result")
    if not isinstance(result, dict) or not isinstance(result.get("list"), list):
        raise ValueError("response body has no result.list array")
    return result["list"]


def fetch_hot_list(
    api_url: str,
    api_key: str,
    client: httpx.Client | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> StepResult:
    """Fetch the ranked WeChat hot-topic list from TianAPI.

    Returns ``StepResult.success(list[TopicRecord])`` when the body reports
    ``code == 200``; every other outcome is logged and returned as a failure.
    """
    logger.info("📡 Requesting WeChat hot list from %s", api_url)
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.post(api_url, data={"key": api_key})
        else:
            response = client.post(api_url, data={"key": api_key}, timeout=timeout)
        response.raise_for_status()
        payload = response.json()

        code = payload.get("code") if isinstance(payload, dict) else None
        if code != SUCCESS_CODE:
            msg = payload.get("msg") if isinstance(payload, dict) else None
            logger.error("❌ Hot list request rejected (code=%s): %s", code, msg)
            return StepResult.failure(f"code={code}: {msg}")

        topics = HOT_LIST_ADAPTER.validate_python(_extract_list(payload))
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("❌ Hot list request failed: %s", e)
        return StepResult.failure(str(e) or e.__class__.__name__)
    except (ValueError, ValidationError) as e:
        logger.error("❌ Hot list response malformed: %s", e)
        return StepResult.failure(f"malformed response: {e}")

    logger.info("✅ Fetched %d hot topics", len(topics))
    return StepResult.success(topics)
