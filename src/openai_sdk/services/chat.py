"""Chat completions service"""

from typing import Any, Dict, List, Optional, Sequence

from openai_sdk.client.callbacks import Callback, CallHandle
from openai_sdk.client.transport import HttpMethod
from openai_sdk.exceptions import InvalidRequestError
from openai_sdk.models.chat import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatRole,
)
from openai_sdk.services.base import BaseService


class ChatService(BaseService):
    """
    Chat completions (``v1/chat/completions``)

    Example:
        >>> response = await client.chat.send([client.chat.user_message("Hello!")])
        >>> response.first_content
    """

    endpoint = "v1/chat/completions"

    async def send(
        self,
        messages: Sequence[ChatMessage],
        model: str = "gpt-3.5-turbo",
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
        n: Optional[int] = None,
        stop: Optional[List[str]] = None,
        presence_penalty: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        logit_bias: Optional[Dict[str, int]] = None,
        user: Optional[str] = None,
    ) -> ChatCompletionResponse:
        """
        Create a chat completion

        Args:
            messages: Conversation so far, oldest first
            model: Model name
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            top_p: Nucleus sampling mass
            n: Number of choices to generate
            stop: Stop sequences
            presence_penalty: Presence penalty
            frequency_penalty: Frequency penalty
            logit_bias: Token id to bias map
            user: End-user identifier

        Returns:
            Chat completion with at least one choice

        Raises:
            InvalidRequestError: If no messages are given
        """
        if not messages:
            raise InvalidRequestError("messages must not be empty", field="messages")

        request = ChatCompletionRequest(
            model=model,
            messages=list(messages),
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            n=n,
            stream=False,
            stop=stop,
            presence_penalty=presence_penalty,
            frequency_penalty=frequency_penalty,
            logit_bias=logit_bias,
            user=user,
        )

        return await self._client.send(
            self.endpoint, HttpMethod.POST, request, ChatCompletionResponse
        )

    def send_with_callback(
        self,
        messages: Sequence[ChatMessage],
        callback: Callback,
        **kwargs: Any,
    ) -> CallHandle:
        """Callback form of :meth:`send`; keyword arguments are forwarded"""
        return self._submit(self.send(messages, **kwargs), callback)

    def system_message(self, content: str) -> ChatMessage:
        return ChatMessage(role=ChatRole.SYSTEM, content=content)

    def user_message(self, content: str, name: Optional[str] = None) -> ChatMessage:
        return ChatMessage(role=ChatRole.USER, content=content, name=name)

    def assistant_message(
        self, content: str, name: Optional[str] = None
    ) -> ChatMessage:
        return ChatMessage(role=ChatRole.ASSISTANT, content=content, name=name)
