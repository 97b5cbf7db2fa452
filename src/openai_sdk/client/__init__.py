"""
HTTP Client module for the OpenAI SDK
"""

from openai_sdk.client.openai_client import OpenAIClient
from openai_sdk.client.transport import (
    Transport,
    HttpMethod,
    FormPart,
    MultipartFormData,
)
from openai_sdk.client.requests_transport import RequestsTransport
from openai_sdk.client.codec import (
    encode_json,
    encode_multipart,
    decode_model,
    generate_boundary,
    multipart_content_type,
)
from openai_sdk.client.classifier import classify_response
from openai_sdk.client.callbacks import CallHandle, CallResult, submit, watch

__all__ = [
    "OpenAIClient",
    "Transport",
    "HttpMethod",
    "FormPart",
    "MultipartFormData",
    "RequestsTransport",
    "encode_json",
    "encode_multipart",
    "decode_model",
    "generate_boundary",
    "multipart_content_type",
    "classify_response",
    "CallHandle",
    "CallResult",
    "submit",
    "watch",
]
