"""
Request/response codec
JSON and multipart/form-data encoding, and typed decoding of response bodies
"""

import uuid
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from openai_sdk.client.transport import MultipartFormData
from openai_sdk.exceptions import DecodingError, EncodingError


M = TypeVar("M", bound=BaseModel)

CRLF = b"\r\n"
JSON_CONTENT_TYPE = "application/json"


def generate_boundary() -> str:
    """Generate a fresh multipart boundary token"""
    return f"Boundary-{uuid.uuid4().hex}"


def multipart_content_type(boundary: str) -> str:
    """Content-Type header value for a multipart body"""
    return f"multipart/form-data; boundary={boundary}"


def encode_multipart(form_data: MultipartFormData, boundary: str) -> bytes:
    """
    Encode form parts into a multipart/form-data body

    Args:
        form_data: Parts in wire order
        boundary: Boundary token (without the leading dashes)

    Returns:
        Encoded body, terminated by the closing delimiter
    """
    delimiter = f"--{boundary}".encode("utf-8")
    chunks = []

    for part in form_data.parts:
        disposition = f'Content-Disposition: form-data; name="{part.name}"'
        if part.filename is not None:
            disposition += f'; filename="{part.filename}"'

        chunks.append(delimiter + CRLF)
        chunks.append(disposition.encode("utf-8") + CRLF)
        if part.mime_type is not None:
            chunks.append(f"Content-Type: {part.mime_type}".encode("utf-8") + CRLF)
        chunks.append(CRLF)
        chunks.append(part.data)
        chunks.append(CRLF)

    chunks.append(delimiter + b"--" + CRLF)
    return b"".join(chunks)


def encode_json(request: BaseModel) -> bytes:
    """
    Serialize a request model to JSON bytes

    Unset optional fields are left out of the body.

    Raises:
        EncodingError: If the model cannot be serialized
    """
    try:
        return request.model_dump_json(exclude_none=True, by_alias=True).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(e) from e


def decode_model(data: bytes, model_cls: Type[M]) -> M:
    """
    Decode a response body into a model

    Unknown fields are ignored.

    Raises:
        DecodingError: If the body does not match the schema
    """
    try:
        return model_cls.model_validate_json(data)
    except ValidationError as e:
        raise DecodingError(e) from e


def decode_text(data: bytes) -> str:
    """Decode a plain-text response body"""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError(e) from e
