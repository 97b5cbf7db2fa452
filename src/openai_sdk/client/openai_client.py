"""
OpenAI client
Orchestrates encoding, transport and decoding for every endpoint service
"""

import logging
from functools import cached_property
from typing import Dict, Optional, Type, TypeVar, Union, overload

from pydantic import BaseModel

from openai_sdk.client.codec import decode_model, decode_text, encode_json
from openai_sdk.client.requests_transport import RequestsTransport
from openai_sdk.client.transport import HttpMethod, MultipartFormData, Transport
from openai_sdk.config.config_loader import ConfigLoader
from openai_sdk.config.openai_config import OpenAIConfig
from openai_sdk.services.audio import AudioService
from openai_sdk.services.chat import ChatService
from openai_sdk.services.completions import CompletionService
from openai_sdk.services.embeddings import EmbeddingsService
from openai_sdk.services.images import ImagesService
from openai_sdk.services.moderation import ModerationService


M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)


class OpenAIClient:
    """
    Client for the OpenAI HTTP API

    Owns a configuration and a transport. Endpoint services are created on
    first access and cached for the lifetime of the client; all of them
    funnel through :meth:`send` and :meth:`send_multipart`.

    Example:
        >>> client = OpenAIClient(OpenAIConfig(api_key="sk-..."))
        >>> response = await client.chat.send([client.chat.user_message("Hello!")])
        >>> print(response.first_content)
    """

    def __init__(
        self,
        config: OpenAIConfig,
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Create a new client

        Args:
            config: Client configuration
            transport: Transport to use (defaults to RequestsTransport)
        """
        self._config = config
        self._transport = transport or RequestsTransport()

    @classmethod
    def from_api_key(
        cls, api_key: str, organization: Optional[str] = None
    ) -> "OpenAIClient":
        """Create a client with default settings for an API key"""
        return cls(OpenAIConfig(api_key=api_key, organization=organization))

    @classmethod
    def from_environment(
        cls, transport: Optional[Transport] = None
    ) -> "OpenAIClient":
        """Create a client from OPENAI_* environment variables"""
        return cls(ConfigLoader().load(env=True), transport=transport)

    @property
    def config(self) -> OpenAIConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    @cached_property
    def chat(self) -> ChatService:
        return ChatService(self)

    @cached_property
    def completions(self) -> CompletionService:
        return CompletionService(self)

    @cached_property
    def embeddings(self) -> EmbeddingsService:
        return EmbeddingsService(self)

    @cached_property
    def images(self) -> ImagesService:
        return ImagesService(self)

    @cached_property
    def audio(self) -> AudioService:
        return AudioService(self)

    @cached_property
    def moderation(self) -> ModerationService:
        return ModerationService(self)

    async def send(
        self,
        path: str,
        method: HttpMethod,
        request: Optional[BaseModel],
        response_model: Type[M],
        headers: Optional[Dict[str, str]] = None,
    ) -> M:
        """
        Send a JSON request and decode the response

        Args:
            path: Endpoint path
            method: HTTP method
            request: Request model, or None for a bodyless request
            response_model: Model the success body is decoded into
            headers: Extra headers

        Raises:
            EncodingError: Request could not be serialized (nothing is sent)
            DecodingError: Success body did not match response_model
            NetworkError, AuthenticationError, ApiError, UnknownError:
                as raised by the transport
        """
        body = encode_json(request) if request is not None else None

        logger.debug(f"Sending {method.value} {path}")
        data = await self._transport.perform_request(
            path, method, body, headers or {}, self._config
        )
        return decode_model(data, response_model)

    @overload
    async def send_multipart(
        self, path: str, form_data: MultipartFormData, response_model: Type[M]
    ) -> M: ...

    @overload
    async def send_multipart(
        self, path: str, form_data: MultipartFormData, response_model: None = None
    ) -> str: ...

    async def send_multipart(
        self,
        path: str,
        form_data: MultipartFormData,
        response_model: Optional[Type[M]] = None,
    ) -> Union[M, str]:
        """
        Send a multipart upload and decode the response

        With no response_model the body is returned as text, for endpoints
        answering in plain-text formats.
        """
        logger.debug(f"Sending multipart POST {path} ({len(form_data)} parts)")
        data = await self._transport.perform_multipart(path, form_data, self._config)

        if response_model is None:
            return decode_text(data)
        return decode_model(data, response_model)

    async def close(self) -> None:
        """Close the transport"""
        await self._transport.close()

    async def __aenter__(self) -> "OpenAIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
