"""Chat completion models"""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from openai_sdk.models.common import Usage


class ChatRole(str, Enum):
    """Role of a chat message author"""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single chat message"""

    role: ChatRole = Field(..., description="Message author role")
    content: str = Field(..., description="Message text")
    name: Optional[str] = Field(None, description="Optional author name")


class ChatCompletionRequest(BaseModel):
    """Body of a chat completion request"""

    model: str
    messages: List[ChatMessage]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: bool = False
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None


class ChatChoice(BaseModel):
    """One generated chat message"""

    index: int = Field(0, description="Choice index")
    message: ChatMessage = Field(..., description="Generated message")
    finish_reason: Optional[str] = Field(None, description="Why generation stopped")


class ChatCompletionResponse(BaseModel):
    """Chat completion response"""

    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: List[ChatChoice] = Field(..., min_length=1)
    usage: Optional[Usage] = None

    @property
    def first_content(self) -> str:
        """Content of the first choice"""
        return self.choices[0].message.content
