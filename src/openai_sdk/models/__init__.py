"""Models module initialization"""

from openai_sdk.models.common import Usage
from openai_sdk.models.error import APIErrorDetails, APIErrorResponse
from openai_sdk.models.chat import (
    ChatRole,
    ChatMessage,
    ChatCompletionRequest,
    ChatChoice,
    ChatCompletionResponse,
)
from openai_sdk.models.completion import (
    CompletionRequest,
    CompletionChoice,
    CompletionResponse,
)
from openai_sdk.models.embeddings import (
    EmbeddingsRequest,
    Embedding,
    EmbeddingsResponse,
)
from openai_sdk.models.images import (
    ImageSize,
    ImageResponseFormat,
    ImageGenerationRequest,
    ImageData,
    ImageGenerationResponse,
)
from openai_sdk.models.audio import (
    AudioResponseFormat,
    TranscriptionResponse,
    TranslationResponse,
)
from openai_sdk.models.moderation import (
    ModerationRequest,
    ModerationCategories,
    ModerationCategoryScores,
    ModerationResult,
    ModerationResponse,
)

__all__ = [
    "Usage",
    "APIErrorDetails",
    "APIErrorResponse",
    "ChatRole",
    "ChatMessage",
    "ChatCompletionRequest",
    "ChatChoice",
    "ChatCompletionResponse",
    "CompletionRequest",
    "CompletionChoice",
    "CompletionResponse",
    "EmbeddingsRequest",
    "Embedding",
    "EmbeddingsResponse",
    "ImageSize",
    "ImageResponseFormat",
    "ImageGenerationRequest",
    "ImageData",
    "ImageGenerationResponse",
    "AudioResponseFormat",
    "TranscriptionResponse",
    "TranslationResponse",
    "ModerationRequest",
    "ModerationCategories",
    "ModerationCategoryScores",
    "ModerationResult",
    "ModerationResponse",
]
