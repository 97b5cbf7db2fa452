"""Image generation service"""

from typing import Any, Optional

from openai_sdk.client.callbacks import Callback, CallHandle
from openai_sdk.client.transport import HttpMethod
from openai_sdk.exceptions import InvalidRequestError
from openai_sdk.models.images import (
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageResponseFormat,
    ImageSize,
)
from openai_sdk.services.base import BaseService, require_text


MIN_IMAGES = 1
MAX_IMAGES = 10


class ImagesService(BaseService):
    """Image generation (``v1/images/generations``)"""

    endpoint = "v1/images/generations"

    async def generate(
        self,
        prompt: str,
        n: int = 1,
        size: ImageSize = ImageSize.MEDIUM,
        response_format: ImageResponseFormat = ImageResponseFormat.URL,
        user: Optional[str] = None,
    ) -> ImageGenerationResponse:
        """
        Generate images from a prompt

        Args:
            prompt: Text description of the image
            n: Number of images, 1 to 10
            size: Image size
            response_format: URL or base64 payload
            user: End-user identifier
        """
        require_text(prompt, "prompt")
        if not MIN_IMAGES <= n <= MAX_IMAGES:
            raise InvalidRequestError(
                f"n must be between {MIN_IMAGES} and {MAX_IMAGES}", field="n"
            )

        request = ImageGenerationRequest(
            prompt=prompt,
            n=n,
            size=size,
            response_format=response_format,
            user=user,
        )

        return await self._client.send(
            self.endpoint, HttpMethod.POST, request, ImageGenerationResponse
        )

    def generate_with_callback(
        self, prompt: str, callback: Callback, **kwargs: Any
    ) -> CallHandle:
        """Callback form of :meth:`generate`"""
        return self._submit(self.generate(prompt, **kwargs), callback)
