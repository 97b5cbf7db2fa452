"""Embeddings models"""

from typing import List, Optional
from pydantic import BaseModel, Field

from openai_sdk.models.common import Usage


class EmbeddingsRequest(BaseModel):
    """Body of an embeddings request"""

    model: str
    input: List[str]
    user: Optional[str] = None


class Embedding(BaseModel):
    """A single embedding vector"""

    object: Optional[str] = None
    embedding: List[float] = Field(..., description="Embedding vector")
    index: int = Field(0, description="Index of the input it belongs to")


class EmbeddingsResponse(BaseModel):
    """Embeddings response"""

    object: Optional[str] = None
    model: Optional[str] = None
    data: List[Embedding] = Field(..., min_length=1)
    usage: Optional[Usage] = None
