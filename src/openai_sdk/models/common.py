"""Shared models"""

from typing import Optional
from pydantic import BaseModel, Field


class Usage(BaseModel):
    """Token usage counts"""

    prompt_tokens: int = Field(..., description="Tokens in the prompt")
    completion_tokens: Optional[int] = Field(
        None, description="Tokens in the completion (absent for embeddings)"
    )
    total_tokens: int = Field(..., description="Total tokens")
