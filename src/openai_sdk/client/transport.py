"""
Transport capability for the OpenAI SDK
Defines how request bytes reach the network and response bytes come back
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from openai_sdk.config.openai_config import OpenAIConfig


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class FormPart:
    """One part of a multipart/form-data body"""
    name: str
    data: bytes
    filename: Optional[str] = None
    mime_type: Optional[str] = None


@dataclass
class MultipartFormData:
    """
    Ordered multipart/form-data body

    Parts are encoded in the order they were added.
    """
    parts: List[FormPart] = field(default_factory=list)

    def add_field(self, name: str, value: str) -> "MultipartFormData":
        """Append a plain text field"""
        self.parts.append(FormPart(name=name, data=value.encode("utf-8")))
        return self

    def add_file(
        self,
        name: str,
        filename: str,
        data: bytes,
        mime_type: Optional[str] = None,
    ) -> "MultipartFormData":
        """Append a file part"""
        self.parts.append(
            FormPart(name=name, data=data, filename=filename, mime_type=mime_type)
        )
        return self

    def __len__(self) -> int:
        return len(self.parts)


class Transport(ABC):
    """
    Moves request bytes to the API and returns the response body.

    Implementations own header injection (``Authorization`` and the
    optional ``OpenAI-Organization``) and response classification: a
    non-2xx status never comes back as bytes. Failures are raised as
    :class:`~openai_sdk.exceptions.NetworkError` when no HTTP response was
    received, and as the classified API failure otherwise.

    A single transport instance serves many in-flight calls at once, so
    implementations must be safe to use concurrently.
    """

    @abstractmethod
    async def perform_request(
        self,
        path: str,
        method: HttpMethod,
        body: Optional[bytes],
        headers: Dict[str, str],
        config: OpenAIConfig,
    ) -> bytes:
        """Send a JSON (or bodyless) request and return the response body.

        Args:
            path: Endpoint path relative to ``config.base_url``.
            method: HTTP method.
            body: JSON-encoded body, or None.
            headers: Extra headers applied after the defaults.
            config: Client configuration.

        Returns:
            Raw body of a 2xx response.
        """
        ...

    @abstractmethod
    async def perform_multipart(
        self,
        path: str,
        form_data: MultipartFormData,
        config: OpenAIConfig,
    ) -> bytes:
        """Send a multipart/form-data POST and return the response body."""
        ...

    async def close(self) -> None:
        """Release transport resources."""
        return None
