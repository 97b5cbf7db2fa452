"""Text completions service"""

from typing import Any, Dict, List, Optional

from openai_sdk.client.callbacks import Callback, CallHandle
from openai_sdk.client.transport import HttpMethod
from openai_sdk.models.completion import CompletionRequest, CompletionResponse
from openai_sdk.services.base import BaseService, require_text


class CompletionService(BaseService):
    """Text completions (``v1/completions``)"""

    endpoint = "v1/completions"

    async def send(
        self,
        prompt: str,
        model: str = "text-davinci-003",
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
        n: Optional[int] = None,
        logprobs: Optional[int] = None,
        echo: Optional[bool] = None,
        stop: Optional[List[str]] = None,
        presence_penalty: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        best_of: Optional[int] = None,
        logit_bias: Optional[Dict[str, int]] = None,
        user: Optional[str] = None,
    ) -> CompletionResponse:
        """Create a text completion for a prompt"""
        require_text(prompt, "prompt")

        request = CompletionRequest(
            model=model,
            prompt=prompt,
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            n=n,
            stream=False,
            logprobs=logprobs,
            echo=echo,
            stop=stop,
            presence_penalty=presence_penalty,
            frequency_penalty=frequency_penalty,
            best_of=best_of,
            logit_bias=logit_bias,
            user=user,
        )

        return await self._client.send(
            self.endpoint, HttpMethod.POST, request, CompletionResponse
        )

    def send_with_callback(
        self, prompt: str, callback: Callback, **kwargs: Any
    ) -> CallHandle:
        """Callback form of :meth:`send`"""
        return self._submit(self.send(prompt, **kwargs), callback)
