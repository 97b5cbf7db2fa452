"""
OpenAI Configuration Types and Schema
Immutable configuration object shared by every request of a client
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_BASE_URL = "https://api.openai.com"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = DEFAULT_BASE_URL
    TIMEOUT = 60.0
    MAX_TIMEOUT = 600.0


# Environment variable mapping
ENV_VAR_MAPPING = {
    "OPENAI_API_KEY": "api_key",
    "OPENAI_ORGANIZATION": "organization",
    "OPENAI_BASE_URL": "base_url",
    "OPENAI_TIMEOUT": "timeout",
}


class OpenAIConfig(BaseModel):
    """
    Client configuration

    The credential is required but not checked for content: an empty key
    is sent as-is and rejected by the server with a 401.
    """

    api_key: str = Field(
        ...,
        description="API key sent as a bearer token"
    )
    organization: Optional[str] = Field(
        default=None,
        description="Organization ID sent in the OpenAI-Organization header"
    )
    base_url: str = Field(
        default=ConfigDefaults.BASE_URL,
        description="Base URL every request path is joined to"
    )
    timeout: float = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
        le=ConfigDefaults.MAX_TIMEOUT,
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base_url is a valid URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v

    def build_url(self, path: str) -> str:
        """Join the base URL with an endpoint path"""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
