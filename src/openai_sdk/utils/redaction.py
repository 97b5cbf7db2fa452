"""Redaction of secrets before they reach log output"""

from typing import Any


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "api_key",
    "api-key",
    "openai-organization",
    "organization",
]

REDACTED = "[REDACTED]"


def redact_sensitive_data(obj: Any) -> Any:
    """Redact sensitive data from object for logging"""
    if obj is None or isinstance(obj, str):
        return obj

    if isinstance(obj, list):
        return [redact_sensitive_data(item) for item in obj]

    if isinstance(obj, dict):
        redacted = {}
        for key, value in obj.items():
            lower_key = str(key).lower()
            if any(field in lower_key for field in SENSITIVE_FIELDS):
                redacted[key] = REDACTED
            elif isinstance(value, (dict, list)):
                redacted[key] = redact_sensitive_data(value)
            else:
                redacted[key] = value
        return redacted

    return obj
