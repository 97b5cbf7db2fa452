"""
OpenAI SDK for Python

Main entry point for the SDK
"""

import logging

from openai_sdk.client import OpenAIClient
from openai_sdk.exceptions import (
    OpenAIError,
    ErrorCategory,
    ApiError,
    AuthenticationError,
    NetworkError,
    NetworkErrorCode,
    EncodingError,
    DecodingError,
    InvalidRequestError,
    UnknownError,
    ConfigError,
)

# Transport pipeline
from openai_sdk.client import (
    Transport,
    RequestsTransport,
    HttpMethod,
    FormPart,
    MultipartFormData,
    CallHandle,
    CallResult,
)

# Configuration
from openai_sdk.config import (
    OpenAIConfig,
    ConfigLoader,
    ConfigValidator,
    ConfigDefaults,
    DEFAULT_BASE_URL,
    ENV_VAR_MAPPING,
)

# Models
from openai_sdk.models import (
    ChatRole,
    ChatMessage,
    ChatCompletionResponse,
    CompletionResponse,
    EmbeddingsResponse,
    ImageSize,
    ImageResponseFormat,
    ImageGenerationResponse,
    AudioResponseFormat,
    TranscriptionResponse,
    TranslationResponse,
    ModerationResponse,
    APIErrorResponse,
    Usage,
)

from openai_sdk.utils import set_log_level

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Client
    "OpenAIClient",
    # Transport pipeline
    "Transport",
    "RequestsTransport",
    "HttpMethod",
    "FormPart",
    "MultipartFormData",
    "CallHandle",
    "CallResult",
    # Exceptions
    "OpenAIError",
    "ErrorCategory",
    "ApiError",
    "AuthenticationError",
    "NetworkError",
    "NetworkErrorCode",
    "EncodingError",
    "DecodingError",
    "InvalidRequestError",
    "UnknownError",
    "ConfigError",
    # Configuration
    "OpenAIConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ConfigDefaults",
    "DEFAULT_BASE_URL",
    "ENV_VAR_MAPPING",
    # Models
    "ChatRole",
    "ChatMessage",
    "ChatCompletionResponse",
    "CompletionResponse",
    "EmbeddingsResponse",
    "ImageSize",
    "ImageResponseFormat",
    "ImageGenerationResponse",
    "AudioResponseFormat",
    "TranscriptionResponse",
    "TranslationResponse",
    "ModerationResponse",
    "APIErrorResponse",
    "Usage",
    # Logging
    "set_log_level",
]
