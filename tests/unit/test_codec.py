"""
Codec Unit Tests
"""

import json
from email import message_from_bytes
from email.policy import HTTP
from typing import Any, List

import pytest
from pydantic import BaseModel

from openai_sdk.client.codec import (
    decode_model,
    decode_text,
    encode_json,
    encode_multipart,
    generate_boundary,
    multipart_content_type,
)
from openai_sdk.client.transport import FormPart, MultipartFormData
from openai_sdk.exceptions import DecodingError, EncodingError
from openai_sdk.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatRole,
    ImageGenerationRequest,
    ImageResponseFormat,
    ModerationResponse,
)


def parse_multipart(body: bytes, boundary: str) -> List[Any]:
    """Parse a multipart body with the standard library email parser"""
    header = f"Content-Type: {multipart_content_type(boundary)}\r\n\r\n".encode()
    message = message_from_bytes(header + body, policy=HTTP)
    assert message.is_multipart()
    return list(message.iter_parts())


class TestMultipartEncoding:
    """Tests for encode_multipart"""

    def test_exact_framing(self):
        """Should frame each part and close the body"""
        form = MultipartFormData([
            FormPart(name="file", data=b"RIFF", filename="a.wav", mime_type="audio/wav"),
            FormPart(name="model", data=b"whisper-1"),
        ])

        body = encode_multipart(form, "XyZ")

        assert body == (
            b"--XyZ\r\n"
            b'Content-Disposition: form-data; name="file"; filename="a.wav"\r\n'
            b"Content-Type: audio/wav\r\n"
            b"\r\n"
            b"RIFF\r\n"
            b"--XyZ\r\n"
            b'Content-Disposition: form-data; name="model"\r\n'
            b"\r\n"
            b"whisper-1\r\n"
            b"--XyZ--\r\n"
        )

    def test_empty_form_has_only_closing_delimiter(self):
        assert encode_multipart(MultipartFormData(), "b") == b"--b--\r\n"

    def test_round_trip_preserves_order_and_content(self):
        """Should re-parse into the same parts, in order, byte-identical"""
        binary = bytes(range(0x20, 0x100))
        form = MultipartFormData()
        form.add_file("file", "speech.mp3", binary, "audio/mpeg")
        form.add_field("model", "whisper-1")
        form.add_field("response_format", "json")
        form.add_field("prompt", "Talk about -- boundaries")
        boundary = generate_boundary()

        parts = parse_multipart(encode_multipart(form, boundary), boundary)

        assert [p.get_param("name", header="content-disposition") for p in parts] == [
            "file", "model", "response_format", "prompt",
        ]
        assert parts[0].get_filename() == "speech.mp3"
        assert parts[0].get_content_type() == "audio/mpeg"
        assert [p.get_payload(decode=True) for p in parts] == [
            part.data for part in form.parts
        ]

    def test_boundaries_are_unique(self):
        boundaries = {generate_boundary() for _ in range(100)}
        assert len(boundaries) == 100

    def test_content_type(self):
        assert multipart_content_type("abc") == "multipart/form-data; boundary=abc"

    def test_add_field_encodes_utf8(self):
        form = MultipartFormData().add_field("prompt", "héllo")
        assert form.parts[0].data == "héllo".encode("utf-8")
        assert form.parts[0].filename is None
        assert form.parts[0].mime_type is None


class TestJsonEncoding:
    """Tests for encode_json"""

    def test_snake_case_and_omits_unset(self):
        request = ImageGenerationRequest(
            prompt="A cute cat", response_format=ImageResponseFormat.B64_JSON
        )

        payload = json.loads(encode_json(request))

        assert payload == {"prompt": "A cute cat", "response_format": "b64_json"}

    def test_round_trip(self):
        """Should decode back into equal field values"""
        request = ChatCompletionRequest(
            model="gpt-3.5-turbo",
            messages=[ChatMessage(role=ChatRole.USER, content="Hello!")],
            max_tokens=50,
            temperature=0.2,
            logit_bias={"50256": -100},
        )

        decoded = ChatCompletionRequest.model_validate_json(encode_json(request))

        assert decoded == request
        assert json.loads(encode_json(request))["max_tokens"] == 50

    def test_unserializable_raises_encoding_error(self):
        class Opaque(BaseModel):
            payload: Any

        with pytest.raises(EncodingError) as exc_info:
            encode_json(Opaque(payload=object()))

        assert exc_info.value.cause is not None


class TestDecoding:
    """Tests for decode_model and decode_text"""

    def test_ignores_unknown_fields(self, chat_response):
        chat_response["system_fingerprint"] = "fp_1"
        chat_response["choices"][0]["logprobs"] = None

        response = decode_model(json.dumps(chat_response).encode(), ChatCompletionResponse)

        assert response.first_content == "Hello, how can I help you today?"

    def test_schema_mismatch_raises_decoding_error(self):
        with pytest.raises(DecodingError):
            decode_model(b'{"unexpected": true}', ChatCompletionResponse)

    def test_invalid_json_raises_decoding_error(self):
        with pytest.raises(DecodingError):
            decode_model(b"<html>", ChatCompletionResponse)

    def test_empty_primary_list_raises_decoding_error(self, chat_response):
        chat_response["choices"] = []
        with pytest.raises(DecodingError):
            decode_model(json.dumps(chat_response).encode(), ChatCompletionResponse)

    def test_moderation_aliases(self):
        flags = {
            "hate": False, "hate/threatening": False, "self-harm": True,
            "sexual": False, "sexual/minors": False, "violence": False,
            "violence/graphic": False,
        }
        scores = {key: 0.5 for key in flags}
        body = json.dumps({
            "id": "modr-1",
            "model": "text-moderation-latest",
            "results": [{"flagged": True, "categories": flags, "category_scores": scores}],
        }).encode()

        response = decode_model(body, ModerationResponse)

        assert response.results[0].categories.self_harm is True
        assert response.results[0].category_scores.violence_graphic == 0.5

    def test_decode_text(self):
        assert decode_text(b"1\n00:00:00,000 --> 00:00:01,000\nHi\n").startswith("1\n")

    def test_decode_text_invalid_utf8(self):
        with pytest.raises(DecodingError):
            decode_text(b"\xff\xfe\xfa")
