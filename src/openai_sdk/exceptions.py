"""Exception classes for the OpenAI SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from openai_sdk.models.error import APIErrorResponse


class ErrorCategory(str, Enum):
    """Error category codes"""
    API = "API"
    AUTH = "AUTH"
    NETWORK = "NET"
    ENCODING = "ENCODING"
    DECODING = "DECODING"
    VALIDATION = "VAL"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class NetworkErrorCode(str, Enum):
    """Network error codes"""
    TIMEOUT = "NET01"
    CONNECTION_FAILED = "NET02"
    SSL_ERROR = "NET04"
    UNKNOWN = "NET10"


class OpenAIError(Exception):
    """
    Base exception for SDK errors

    Every failure surfaced by the client is exactly one subclass of this
    class. The subclasses do not inherit from each other, so callers can
    branch on the kind of failure with plain ``except`` clauses.
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def is_category(self, category: ErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [self.message]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class ApiError(OpenAIError):
    """
    The server understood the request and rejected it

    Carries the server-authored message and the optional ``type``,
    ``param`` and ``code`` fields of the error payload.
    """

    category = ErrorCategory.API

    def __init__(
        self,
        response: "APIErrorResponse",
        status_code: Optional[int] = None,
    ) -> None:
        detail = response.error
        super().__init__(
            f"API Error: {detail.message}",
            code=detail.code,
            status_code=status_code,
            details=response.model_dump(exclude_none=True),
        )
        self.response = response
        self.message = detail.message
        self.error_type = detail.type
        self.param = detail.param


class AuthenticationError(OpenAIError):
    """The credential was rejected (HTTP 401)"""

    category = ErrorCategory.AUTH

    def __init__(
        self,
        message: str = "Authentication Error: Invalid or missing API key",
    ) -> None:
        super().__init__(message, code="AUTH01", status_code=401)


class NetworkError(OpenAIError):
    """
    No interpretable HTTP exchange took place

    Raised for DNS failures, refused connections, timeouts and TLS errors.
    """

    category = ErrorCategory.NETWORK

    def __init__(
        self,
        message: str,
        network_code: NetworkErrorCode = NetworkErrorCode.UNKNOWN,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            f"Network Error: {message}",
            code=network_code.value,
            cause=cause,
        )
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, cause: Optional[BaseException] = None
    ) -> "NetworkError":
        """Create a timeout error"""
        return cls("Request timed out", NetworkErrorCode.TIMEOUT, cause)

    @classmethod
    def connection_failed(
        cls, cause: Optional[BaseException] = None
    ) -> "NetworkError":
        """Create a connection error"""
        return cls(
            f"Connection failed: {cause}" if cause else "Connection failed",
            NetworkErrorCode.CONNECTION_FAILED,
            cause,
        )

    @classmethod
    def ssl_error(
        cls, cause: Optional[BaseException] = None
    ) -> "NetworkError":
        """Create an SSL error"""
        return cls("SSL/TLS error", NetworkErrorCode.SSL_ERROR, cause)


class EncodingError(OpenAIError):
    """The request payload could not be serialized"""

    category = ErrorCategory.ENCODING

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            f"Encoding Error: {cause}", code="ENCODING01", cause=cause
        )


class DecodingError(OpenAIError):
    """The response body did not match the expected schema"""

    category = ErrorCategory.DECODING

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            f"Decoding Error: {cause}", code="DECODING01", cause=cause
        )


class InvalidRequestError(OpenAIError):
    """Caller-supplied arguments violate a precondition"""

    category = ErrorCategory.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(f"Invalid Request: {message}", code="VALIDATION_ERROR")
        self.field = field


class UnknownError(OpenAIError):
    """Non-2xx response whose body is not a structured API error"""

    category = ErrorCategory.UNKNOWN

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"Unknown Error: {detail or 'No details available'}",
            status_code=status_code,
        )
        self.detail = detail


class ConfigError(OpenAIError):
    """Configuration error"""

    category = ErrorCategory.CONFIG

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
