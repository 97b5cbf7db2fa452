"""Text completion models"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from openai_sdk.models.common import Usage


class CompletionRequest(BaseModel):
    """Body of a text completion request"""

    model: str
    prompt: str
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: bool = False
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None


class CompletionChoice(BaseModel):
    """One generated completion"""

    text: str = Field(..., description="Generated text")
    index: int = Field(0, description="Choice index")
    logprobs: Optional[Dict[str, Any]] = None
    finish_reason: Optional[str] = None


class CompletionResponse(BaseModel):
    """Text completion response"""

    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: List[CompletionChoice] = Field(..., min_length=1)
    usage: Optional[Usage] = None

    @property
    def first_text(self) -> str:
        """Text of the first choice"""
        return self.choices[0].text
