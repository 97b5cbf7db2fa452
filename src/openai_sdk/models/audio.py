"""Audio models"""

from enum import Enum
from pydantic import BaseModel, Field


class AudioResponseFormat(str, Enum):
    """Response format for transcription and translation"""
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"

    @property
    def is_json(self) -> bool:
        return self in (AudioResponseFormat.JSON, AudioResponseFormat.VERBOSE_JSON)


class TranscriptionResponse(BaseModel):
    """Response from the transcription endpoint"""

    text: str = Field(..., description="Transcribed text")


class TranslationResponse(BaseModel):
    """Response from the translation endpoint"""

    text: str = Field(..., description="Translated (English) text")
