"""
Response Classifier Unit Tests
"""

import json

import pytest

from openai_sdk.client.classifier import classify_response
from openai_sdk.exceptions import (
    ApiError,
    AuthenticationError,
    ErrorCategory,
    OpenAIError,
    UnknownError,
)


API_ERROR_BODY = json.dumps({
    "error": {
        "message": "Invalid model",
        "type": "invalid_request_error",
        "param": "model",
        "code": "model_not_found",
    }
}).encode()


class TestClassifyResponse:
    """Tests for classify_response"""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_returns_body(self, status):
        assert classify_response(status, b'{"ok": true}') == b'{"ok": true}'

    def test_401_with_empty_body_is_auth_error(self):
        with pytest.raises(AuthenticationError) as exc_info:
            classify_response(401, b"")

        assert exc_info.value.status_code == 401
        assert exc_info.value.is_category(ErrorCategory.AUTH)

    def test_401_with_api_error_body_is_still_auth_error(self):
        with pytest.raises(AuthenticationError):
            classify_response(401, API_ERROR_BODY)

    def test_structured_error_is_api_error(self):
        with pytest.raises(ApiError) as exc_info:
            classify_response(400, b'{"error":{"message":"bad request"}}')

        error = exc_info.value
        assert error.message == "bad request"
        assert error.status_code == 400
        assert error.error_type is None
        assert error.param is None
        assert error.code is None

    def test_api_error_carries_all_fields(self):
        with pytest.raises(ApiError) as exc_info:
            classify_response(404, API_ERROR_BODY)

        error = exc_info.value
        assert error.message == "Invalid model"
        assert error.error_type == "invalid_request_error"
        assert error.param == "model"
        assert error.code == "model_not_found"
        assert error.response.error.message == "Invalid model"
        assert "HTTP 404" in error.get_description()

    def test_numeric_error_code_is_api_error(self):
        """Should keep the server message when the error code is a number"""
        with pytest.raises(ApiError) as exc_info:
            classify_response(429, b'{"error":{"message":"slow down","code":429,"param":null}}')

        error = exc_info.value
        assert error.message == "slow down"
        assert error.code == "429"
        assert error.status_code == 429

    @pytest.mark.parametrize("body", [b"", b"<html>Bad Gateway</html>", b'{"detail": "x"}'])
    def test_unparseable_error_is_unknown(self, body):
        with pytest.raises(UnknownError) as exc_info:
            classify_response(502, body)

        assert exc_info.value.detail == "Status code: 502"
        assert exc_info.value.status_code == 502

    def test_failure_kinds_are_disjoint(self):
        """Should not let one failure kind be caught as another"""
        kinds = [ApiError, AuthenticationError, UnknownError]
        for kind in kinds:
            assert issubclass(kind, OpenAIError)
            for other in kinds:
                if other is not kind:
                    assert not issubclass(kind, other)
