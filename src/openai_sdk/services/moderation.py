"""Moderation service"""

from typing import Any, Optional, Sequence, Union

from openai_sdk.client.callbacks import Callback, CallHandle
from openai_sdk.client.transport import HttpMethod
from openai_sdk.models.moderation import ModerationRequest, ModerationResponse
from openai_sdk.services.base import BaseService, normalize_inputs


class ModerationService(BaseService):
    """Content moderation (``v1/moderations``)"""

    endpoint = "v1/moderations"

    async def moderate(
        self,
        input: Union[str, Sequence[str]],
        model: Optional[str] = None,
    ) -> ModerationResponse:
        """Classify one or more texts against the content policy"""
        request = ModerationRequest(input=normalize_inputs(input, "input"), model=model)

        return await self._client.send(
            self.endpoint, HttpMethod.POST, request, ModerationResponse
        )

    def moderate_with_callback(
        self,
        input: Union[str, Sequence[str]],
        callback: Callback,
        **kwargs: Any,
    ) -> CallHandle:
        """Callback form of :meth:`moderate`"""
        return self._submit(self.moderate(input, **kwargs), callback)
