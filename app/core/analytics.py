# app/core/analytics.py
"""
Fire-and-forget analytics events.

Events are always logged. When ANALYTICS_WEBHOOK_URL is set they are also
POSTed there as JSON:

    {"event": "waitlist_signup", "params": {"user_type": "buyer", "has_reason": false}}

Nothing in here may raise: a missing or broken sink must not change the
outcome of the request that emitted the event.
"""

import logging
from typing import Any

import requests

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def send_event(url: str, name: str, params: dict[str, Any], timeout: float) -> None:
    """POST one event to the webhook. Failures are logged, never raised."""
    try:
        response = requests.post(
            url,
            json={"event": name, "params": params},
            timeout=timeout,
        )
        if response.status_code >= 400:
            logger.warning(
                "Analytics webhook rejected %s (status %s)",
                name,
                response.status_code,
            )
    except requests.RequestException as e:
        logger.warning("Analytics webhook failed for %s: %s", name, e)


def track_event(name: str, params: dict[str, Any] | None = None) -> None:
    """
    Emit an analytics event.

    Args:
        name: event name, e.g. "waitlist_signup"
        params: flat key/value mapping
    """
    params = params or {}
    logger.info("Event tracked: %s %s", name, params)

    settings = get_settings()
    if not settings.ANALYTICS_WEBHOOK_URL:
        return

    send_event(
        settings.ANALYTICS_WEBHOOK_URL,
        name,
        params,
        timeout=settings.ANALYTICS_TIMEOUT_SECONDS,
    )
