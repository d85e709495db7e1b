"""WxPusher delivery of the rendered hot-list message.

Only the single-recipient ``send/message`` call is used; the body is always
HTML (``contentType`` 2) and never pay-gated.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

from content_engine.models import StepResult

logger = logging.getLogger(__name__)

WXPUSHER_SEND_URL = "https://wxpusher.zjiecode.com/api/send/message"
CONTENT_TYPE_HTML = 2
DEFAULT_SUMMARY = "微信热搜榜推送"
REQUEST_TIMEOUT = 10.0  # seconds


def build_payload(app_token: str, uid: str, content: str, summary: str = DEFAULT_SUMMARY) -> Dict[str, Any]:
    """Return the JSON body for a single-recipient HTML message."""
    return {
        "appToken": app_token,
        "content": content,
        "summary": summary,
        "contentType": CONTENT_TYPE_HTML,
        "uids": [uid],
        "verifyPay": False,
    }


def send_message(
    app_token: str,
    uid: str,
    content: str,
    summary: str = DEFAULT_SUMMARY,
    client: httpx.Client | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> StepResult:
    """POST *content* to WxPusher for *uid*. Success is the body's ``success`` flag."""
    payload = build_payload(app_token, uid, content, summary)
    logger.info("📨 Sending WxPusher message (%d chars)", len(content))
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.post(WXPUSHER_SEND_URL, json=payload)
        else:
            response = client.post(WXPUSHER_SEND_URL, json=payload, timeout=timeout)
        response.raise_for_status()
        body = response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("❌ WxPusher request failed: %s", e)
        return StepResult.failure(str(e) or e.__class__.__name__)
    except ValueError as e:
        logger.error("❌ WxPusher response is not JSON: %s", e)
        return StepResult.failure(f"malformed response: {e}")

    if not isinstance(body, dict) or not body.get("success"):
        msg = body.get("msg") if isinstance(body, dict) else body
        logger.error("❌ WxPusher rejected the message: %s", msg)
        return StepResult.failure(str(msg))

    logger.debug("WxPusher delivery records: %s", body.get("data"))
    logger.info("✅ Message sent")
    return StepResult.success(body.get("data"))
