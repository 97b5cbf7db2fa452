"""Utilities module initialization"""

from openai_sdk.utils.logger import get_logger, set_log_level, get_log_level
from openai_sdk.utils.redaction import redact_sensitive_data

__all__ = ["get_logger", "set_log_level", "get_log_level", "redact_sensitive_data"]
