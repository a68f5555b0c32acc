# tests/test_analytics.py

"""
Tests for the analytics sink.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from app.core.analytics import track_event
from app.core.config import get_settings

WEBHOOK = "https://hooks.example.com/analytics"


@pytest.fixture
def webhook(monkeypatch):
    monkeypatch.setattr(get_settings(), "ANALYTICS_WEBHOOK_URL", WEBHOOK)
    return WEBHOOK


def test_no_webhook_is_a_noop():
    with patch("app.core.analytics.requests.post") as post:
        track_event("page_view", {"page_title": "Resale Landing Page"})

    post.assert_not_called()


def test_posts_event_to_webhook(webhook):
    with patch("app.core.analytics.requests.post", return_value=Mock(status_code=204)) as post:
        track_event("waitlist_signup", {"user_type": "buyer", "has_reason": True})

    post.assert_called_once()
    args, kwargs = post.call_args
    assert args == (webhook,)
    assert kwargs["json"] == {
        "event": "waitlist_signup",
        "params": {"user_type": "buyer", "has_reason": True},
    }


def test_missing_params_sends_empty_mapping(webhook):
    with patch("app.core.analytics.requests.post", return_value=Mock(status_code=200)) as post:
        track_event("admin_login_success")

    assert post.call_args.kwargs["json"] == {"event": "admin_login_success", "params": {}}


def test_webhook_errors_are_swallowed(webhook):
    with patch(
        "app.core.analytics.requests.post",
        side_effect=requests.ConnectionError("unreachable"),
    ):
        track_event("signup_error", {"error": "down"})


def test_webhook_rejection_does_not_raise(webhook):
    with patch("app.core.analytics.requests.post", return_value=Mock(status_code=500)):
        track_event("export_signups", {"count": 3})
