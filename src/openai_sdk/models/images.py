"""Image generation models"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class ImageSize(str, Enum):
    """Supported image sizes"""
    SMALL = "256x256"
    MEDIUM = "512x512"
    LARGE = "1024x1024"


class ImageResponseFormat(str, Enum):
    """How generated images are returned"""
    URL = "url"
    B64_JSON = "b64_json"


class ImageGenerationRequest(BaseModel):
    """Body of an image generation request"""

    prompt: str
    n: Optional[int] = None
    size: Optional[ImageSize] = None
    response_format: Optional[ImageResponseFormat] = None
    user: Optional[str] = None


class ImageData(BaseModel):
    """One generated image, as a URL or a base64 blob"""

    url: Optional[str] = None
    b64_json: Optional[str] = None


class ImageGenerationResponse(BaseModel):
    """Image generation response"""

    created: int
    data: List[ImageData] = Field(..., min_length=1)
