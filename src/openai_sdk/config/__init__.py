"""
Configuration module
"""

from openai_sdk.config.openai_config import (
    OpenAIConfig,
    DEFAULT_BASE_URL,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from openai_sdk.config.config_loader import ConfigLoader
from openai_sdk.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "OpenAIConfig",
    "DEFAULT_BASE_URL",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
