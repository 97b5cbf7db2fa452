"""Embeddings service"""

from typing import Any, Optional, Sequence, Union

from openai_sdk.client.callbacks import Callback, CallHandle
from openai_sdk.client.transport import HttpMethod
from openai_sdk.models.embeddings import EmbeddingsRequest, EmbeddingsResponse
from openai_sdk.services.base import BaseService, normalize_inputs


class EmbeddingsService(BaseService):
    """Embeddings (``v1/embeddings``)"""

    endpoint = "v1/embeddings"

    async def create(
        self,
        input: Union[str, Sequence[str]],
        model: str = "text-embedding-ada-002",
        user: Optional[str] = None,
    ) -> EmbeddingsResponse:
        """
        Create embeddings

        Args:
            input: A string or a list of strings to embed
            model: Model name
            user: End-user identifier

        Returns:
            One embedding per input, in input order
        """
        request = EmbeddingsRequest(
            model=model,
            input=normalize_inputs(input, "input"),
            user=user,
        )

        return await self._client.send(
            self.endpoint, HttpMethod.POST, request, EmbeddingsResponse
        )

    def create_with_callback(
        self,
        input: Union[str, Sequence[str]],
        callback: Callback,
        **kwargs: Any,
    ) -> CallHandle:
        """Callback form of :meth:`create`"""
        return self._submit(self.create(input, **kwargs), callback)
