"""
Shared test fixtures
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytest

from openai_sdk.client.classifier import classify_response
from openai_sdk.client.openai_client import OpenAIClient
from openai_sdk.client.transport import HttpMethod, MultipartFormData, Transport
from openai_sdk.config import OpenAIConfig


@dataclass
class RecordedRequest:
    path: str
    method: HttpMethod
    body: Optional[bytes]
    headers: Dict[str, str]
    config: OpenAIConfig
    form_data: Optional[MultipartFormData] = None

    def json(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


class MockTransport(Transport):
    """
    Transport double returning a programmed status and body

    The programmed response goes through the real response classifier, so
    statuses are turned into failures exactly as on the wire.
    """

    def __init__(
        self,
        body: bytes = b"",
        status_code: int = 200,
        error: Optional[BaseException] = None,
    ) -> None:
        self.body = body
        self.status_code = status_code
        self.error = error
        self.requests: List[RecordedRequest] = []

    def set_response(self, payload: Any, status_code: int = 200) -> None:
        if isinstance(payload, (bytes, str)):
            self.body = payload.encode("utf-8") if isinstance(payload, str) else payload
        else:
            self.body = json.dumps(payload).encode("utf-8")
        self.status_code = status_code

    @property
    def last_request(self) -> Optional[RecordedRequest]:
        return self.requests[-1] if self.requests else None

    async def perform_request(self, path, method, body, headers, config) -> bytes:
        self.requests.append(RecordedRequest(path, method, body, dict(headers), config))
        return self._respond()

    async def perform_multipart(self, path, form_data, config) -> bytes:
        self.requests.append(
            RecordedRequest(path, HttpMethod.POST, None, {}, config, form_data=form_data)
        )
        return self._respond()

    def _respond(self) -> bytes:
        if self.error is not None:
            raise self.error
        return classify_response(self.status_code, self.body)


@pytest.fixture
def config() -> OpenAIConfig:
    return OpenAIConfig(api_key="test-api-key")


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def client(config: OpenAIConfig, mock_transport: MockTransport) -> OpenAIClient:
    return OpenAIClient(config, transport=mock_transport)


@pytest.fixture
def chat_response() -> Dict[str, Any]:
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo",
        "choices": [{
            "index": 0,
            "message": {
                "role": "assistant",
                "content": "Hello, how can I help you today?",
            },
            "finish_reason": "stop",
        }],
        "usage": {
            "prompt_tokens": 10,
            "completion_tokens": 10,
            "total_tokens": 20,
        },
    }
