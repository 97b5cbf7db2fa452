"""
Logging and Redaction Unit Tests
"""

import logging

import pytest

from openai_sdk.utils import get_log_level, get_logger, redact_sensitive_data, set_log_level
from openai_sdk.utils.redaction import REDACTED


class TestLogger:
    """Tests for SDK logger helpers"""

    @pytest.fixture(autouse=True)
    def restore_level(self):
        logger = logging.getLogger("openai_sdk")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_get_logger_namespaces_names(self):
        assert get_logger("client").name == "openai_sdk.client"
        assert get_logger("openai_sdk.client").name == "openai_sdk.client"
        assert get_logger().name == "openai_sdk"

    def test_set_log_level_by_name(self):
        set_log_level("debug")
        assert get_log_level() == logging.DEBUG

    def test_set_log_level_applies_to_children(self):
        set_log_level(logging.WARNING)
        assert logging.getLogger("openai_sdk.client.requests_transport").getEffectiveLevel() == logging.WARNING

    def test_null_handler_installed(self):
        import openai_sdk  # noqa: F401

        handlers = logging.getLogger("openai_sdk").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestRedaction:
    """Tests for redact_sensitive_data"""

    def test_redacts_credential_headers(self):
        headers = {
            "Authorization": "Bearer sk-secret",
            "OpenAI-Organization": "org-1",
            "Accept": "application/json",
        }

        redacted = redact_sensitive_data(headers)

        assert redacted == {
            "Authorization": REDACTED,
            "OpenAI-Organization": REDACTED,
            "Accept": "application/json",
        }
        assert headers["Authorization"] == "Bearer sk-secret"

    def test_redacts_nested_values(self):
        data = {"config": {"api_key": "sk-1", "timeout": 60}, "items": [{"API-KEY": "x"}]}

        redacted = redact_sensitive_data(data)

        assert redacted["config"] == {"api_key": REDACTED, "timeout": 60}
        assert redacted["items"] == [{"API-KEY": REDACTED}]

    @pytest.mark.parametrize("value", [None, "plain", 42])
    def test_scalars_pass_through(self, value):
        assert redact_sensitive_data(value) == value
