"""Services module initialization"""

from openai_sdk.services.base import BaseService
from openai_sdk.services.chat import ChatService
from openai_sdk.services.completions import CompletionService
from openai_sdk.services.embeddings import EmbeddingsService
from openai_sdk.services.images import ImagesService
from openai_sdk.services.audio import AudioService, audio_mime_type
from openai_sdk.services.moderation import ModerationService

__all__ = [
    "BaseService",
    "ChatService",
    "CompletionService",
    "EmbeddingsService",
    "ImagesService",
    "AudioService",
    "audio_mime_type",
    "ModerationService",
]
