"""Unit tests for logging processors."""

from ja_translator.logging_config import add_app_context, mask_secrets
from tests.fixtures.fakes import VALID_GEMINI_KEY, VALID_GROQ_KEY


def test_add_app_context():
    event = add_app_context(None, "info", {"event": "x"})
    assert event["app"] == "ja-translator"


def test_mask_secrets():
    event = mask_secrets(
        None,
        "info",
        {"event": "call", "api_key": "gsk_secret", "Authorization": "Bearer gsk_secret", "model": "m"},
    )

    assert event["api_key"] == "***"
    assert event["Authorization"] == "***"
    assert event["model"] == "m"


def test_mask_secrets_leaves_empty_values():
    assert mask_secrets(None, "info", {"api_key": ""})["api_key"] == ""


def test_mask_secrets_scrubs_key_shaped_values():
    event = mask_secrets(
        None,
        "warning",
        {"event": "Provider attempt failed", "error_message": f"[400 Bad Request] bad key {VALID_GEMINI_KEY}"},
    )

    assert VALID_GEMINI_KEY not in event["error_message"]
    assert event["error_message"].endswith("bad key ***")
    assert event["event"] == "Provider attempt failed"


def test_mask_secrets_scrubs_groq_keys():
    event = mask_secrets(None, "info", {"detail": f"Bearer {VALID_GROQ_KEY}"})
    assert event["detail"] == "Bearer ***"
