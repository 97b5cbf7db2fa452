"""Audio transcription and translation service"""

import os
from typing import Any, Optional

from openai_sdk.client.callbacks import Callback, CallHandle
from openai_sdk.client.transport import MultipartFormData
from openai_sdk.exceptions import InvalidRequestError
from openai_sdk.models.audio import (
    AudioResponseFormat,
    TranscriptionResponse,
    TranslationResponse,
)
from openai_sdk.services.base import BaseService, require_text


DEFAULT_MIME_TYPE = "application/octet-stream"

# Upload MIME type by file extension
AUDIO_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "mpeg": "audio/mpeg",
    "mpga": "audio/mpeg",
    "mp4": "audio/mp4",
    "m4a": "audio/mp4",
    "wav": "audio/wav",
    "webm": "audio/webm",
}


def audio_mime_type(filename: str) -> str:
    """Guess the MIME type of an audio upload from its file extension"""
    ext = os.path.splitext(filename)[1].lstrip(".").lower()
    return AUDIO_MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


class AudioService(BaseService):
    """
    Audio transcription (``v1/audio/transcriptions``) and translation
    into English (``v1/audio/translations``)

    Uploads are sent as multipart/form-data. For the ``text``, ``srt`` and
    ``vtt`` response formats the server answers in plain text, which is
    returned as the ``text`` of the response model.
    """

    transcription_endpoint = "v1/audio/transcriptions"
    translation_endpoint = "v1/audio/translations"

    async def transcribe(
        self,
        audio_data: bytes,
        filename: str,
        model: str = "whisper-1",
        prompt: Optional[str] = None,
        response_format: AudioResponseFormat = AudioResponseFormat.JSON,
        temperature: Optional[float] = None,
        language: Optional[str] = None,
    ) -> TranscriptionResponse:
        """
        Transcribe audio to text

        Args:
            audio_data: Raw audio file content
            filename: File name, used for the MIME type
            model: Model name
            prompt: Optional text to guide the style
            response_format: Output format
            temperature: Sampling temperature, 0 to 1
            language: ISO-639-1 language of the audio
        """
        form_data = self._build_form(
            audio_data, filename, model, prompt, response_format, temperature
        )
        if language is not None:
            form_data.add_field("language", language)

        if not response_format.is_json:
            text = await self._client.send_multipart(
                self.transcription_endpoint, form_data
            )
            return TranscriptionResponse(text=text)

        return await self._client.send_multipart(
            self.transcription_endpoint, form_data, TranscriptionResponse
        )

    async def translate(
        self,
        audio_data: bytes,
        filename: str,
        model: str = "whisper-1",
        prompt: Optional[str] = None,
        response_format: AudioResponseFormat = AudioResponseFormat.JSON,
        temperature: Optional[float] = None,
    ) -> TranslationResponse:
        """Translate audio into English text"""
        form_data = self._build_form(
            audio_data, filename, model, prompt, response_format, temperature
        )

        if not response_format.is_json:
            text = await self._client.send_multipart(
                self.translation_endpoint, form_data
            )
            return TranslationResponse(text=text)

        return await self._client.send_multipart(
            self.translation_endpoint, form_data, TranslationResponse
        )

    def transcribe_with_callback(
        self,
        audio_data: bytes,
        filename: str,
        callback: Callback,
        **kwargs: Any,
    ) -> CallHandle:
        """Callback form of :meth:`transcribe`"""
        return self._submit(self.transcribe(audio_data, filename, **kwargs), callback)

    def translate_with_callback(
        self,
        audio_data: bytes,
        filename: str,
        callback: Callback,
        **kwargs: Any,
    ) -> CallHandle:
        """Callback form of :meth:`translate`"""
        return self._submit(self.translate(audio_data, filename, **kwargs), callback)

    def _build_form(
        self,
        audio_data: bytes,
        filename: str,
        model: str,
        prompt: Optional[str],
        response_format: AudioResponseFormat,
        temperature: Optional[float],
    ) -> MultipartFormData:
        if not audio_data:
            raise InvalidRequestError("audio_data must not be empty", field="audio_data")
        require_text(filename, "filename")
        if temperature is not None and not 0 <= temperature <= 1:
            raise InvalidRequestError(
                "temperature must be between 0 and 1", field="temperature"
            )

        form_data = MultipartFormData()
        form_data.add_file("file", filename, audio_data, audio_mime_type(filename))
        form_data.add_field("model", model)
        form_data.add_field("response_format", response_format.value)

        if prompt is not None:
            form_data.add_field("prompt", prompt)
        if temperature is not None:
            form_data.add_field("temperature", str(temperature))

        return form_data
