"""
Configuration Validator
Validates client configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from openai_sdk.config.openai_config import ConfigDefaults


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Checks a raw configuration dictionary before it becomes an OpenAIConfig
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_required(config)
        self._validate_formats(config)
        self._validate_ranges(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Raises:
            ConfigError: If configuration is invalid
        """
        from openai_sdk.exceptions import ConfigError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ConfigError(
                f"Configuration validation failed: {error_messages}",
                code="CONFIG_INVALID",
                details={"errors": [e.field for e in result.errors]},
            )

    def _validate_required(self, config: Dict[str, Any]) -> None:
        """Validate required fields are present"""
        # An empty key is allowed; the server answers it with a 401.
        api_key = config.get("api_key")
        if api_key is None:
            self._errors.append(ValidationErrorDetail(
                field="api_key",
                message="api_key is required"
            ))
        elif not isinstance(api_key, str):
            self._errors.append(ValidationErrorDetail(
                field="api_key",
                message="api_key must be a string",
                value="[REDACTED]"
            ))

    def _validate_formats(self, config: Dict[str, Any]) -> None:
        """Validate field formats"""
        base_url = config.get("base_url")
        if base_url is not None:
            if not isinstance(base_url, str) or not base_url.startswith(
                ("http://", "https://")
            ):
                self._errors.append(ValidationErrorDetail(
                    field="base_url",
                    message="base_url must be a valid HTTP/HTTPS URL",
                    value=base_url
                ))

        organization = config.get("organization")
        if organization is not None and not isinstance(organization, str):
            self._errors.append(ValidationErrorDetail(
                field="organization",
                message="organization must be a string",
                value=organization
            ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        timeout = config.get("timeout")
        if timeout is None:
            return

        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) \
                or timeout <= 0:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message="timeout must be a positive number (seconds)",
                value=timeout
            ))
        elif timeout > ConfigDefaults.MAX_TIMEOUT:
            self._errors.append(ValidationErrorDetail(
                field="timeout",
                message=(
                    f"timeout should not exceed {ConfigDefaults.MAX_TIMEOUT:g}s"
                ),
                value=timeout
            ))
