"""
Configuration Loader
Builds an OpenAIConfig from a JSON file, OPENAI_* environment variables
and programmatic overrides
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from openai_sdk.config.openai_config import OpenAIConfig, ENV_VAR_MAPPING
from openai_sdk.config.config_validator import ConfigValidator
from openai_sdk.exceptions import ConfigError


def _normalize_keys(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Map ``OPENAI_*`` secret names onto field names, leave others as-is"""
    return {ENV_VAR_MAPPING.get(key, key): value for key, value in raw.items()}


class ConfigLoader:
    """
    Resolves client configuration

    Sources are layered file < environment < programmatic; a key that is
    missing or None in a higher layer falls through to the one below.
    """

    def __init__(self) -> None:
        self._validator = ConfigValidator()

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read configuration from a JSON object file

        Keys may be field names (``api_key``) or the secret names used in
        the environment (``OPENAI_API_KEY``).

        Raises:
            ConfigError: CONFIG_FILE_NOT_FOUND or CONFIG_PARSE_ERROR
        """
        file_path = Path(path).resolve()
        if not file_path.is_file():
            raise ConfigError(
                f"Configuration file not found: {file_path}",
                code="CONFIG_FILE_NOT_FOUND",
            )

        try:
            raw = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}",
                code="CONFIG_PARSE_ERROR",
                details={"line": e.lineno, "column": e.colno},
            ) from e

        if not isinstance(raw, dict):
            raise ConfigError(
                f"Expected a JSON object in {file_path}, got {type(raw).__name__}",
                code="CONFIG_PARSE_ERROR",
            )

        return _normalize_keys(raw)

    def from_environment(self) -> Dict[str, Any]:
        """Read OPENAI_* variables; unset and empty ones are skipped"""
        config: Dict[str, Any] = {}

        for env_var, field_name in ENV_VAR_MAPPING.items():
            value = os.environ.get(env_var, "")
            if value:
                config[field_name] = self._coerce(field_name, value)

        return config

    def from_dict(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Copy a programmatic configuration"""
        return dict(config)

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """
        Layer configuration dictionaries

        Args:
            sources: Dictionaries in order of increasing priority

        Returns:
            Merged dictionary without None values
        """
        merged: Dict[str, Any] = {}
        for source in sources:
            merged.update(
                (key, value) for key, value in source.items() if value is not None
            )
        return merged

    def resolve(self, config: Dict[str, Any]) -> OpenAIConfig:
        """
        Validate a merged dictionary and build the immutable config

        Raises:
            ConfigError: If configuration is invalid
        """
        self._validator.validate_or_raise(config)

        try:
            return OpenAIConfig(**config)
        except ValidationError as e:
            raise ConfigError(
                "Invalid configuration",
                code="CONFIG_INVALID",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> OpenAIConfig:
        """
        Load and resolve configuration from every requested source

        Args:
            file: JSON configuration file
            env: Read OPENAI_* environment variables
            config: Programmatic overrides

        Returns:
            Resolved OpenAIConfig
        """
        return self.resolve(self.merge(*self._sources(file, env, config)))

    def _sources(
        self,
        file: Optional[Union[str, Path]],
        env: bool,
        config: Optional[Dict[str, Any]],
    ) -> Iterable[Dict[str, Any]]:
        if file is not None:
            yield self.from_file(file)
        if env:
            yield self.from_environment()
        if config is not None:
            yield self.from_dict(config)

    def _coerce(self, field_name: str, value: str) -> Any:
        """Environment values are strings; timeout is numeric"""
        if field_name != "timeout":
            return value
        try:
            return float(value)
        except ValueError:
            # left for the validator to report
            return value
