"""Tests for error descriptions."""

from livelist.services.errors import LiveApiError, describe_error


def test_live_api_error_message_is_used_verbatim():
    assert describe_error(LiveApiError("Network unavailable")) == "Network unavailable"


def test_other_errors_get_generic_prefix():
    assert describe_error(ValueError("bad data")) == "Something went wrong: bad data"


def test_error_without_text_uses_type_name():
    assert describe_error(KeyError()) == "Something went wrong: KeyError"


def test_live_api_error_keeps_status_code():
    error = LiveApiError("Server error (500)", status_code=500)

    assert error.status_code == 500
    assert str(error) == "Server error (500)"
