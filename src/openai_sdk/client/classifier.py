"""
Response classification
Turns an HTTP status and body into success bytes or a typed failure
"""

import logging

from pydantic import ValidationError

from openai_sdk.exceptions import ApiError, AuthenticationError, UnknownError
from openai_sdk.models.error import APIErrorResponse


logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def classify_response(status_code: int, body: bytes) -> bytes:
    """
    Classify a received HTTP response

    Args:
        status_code: HTTP status code
        body: Raw response body

    Returns:
        The body, for 2xx responses

    Raises:
        AuthenticationError: For 401, whatever the body says
        ApiError: For other statuses carrying a structured error payload
        UnknownError: For other statuses with an unparseable body
    """
    if is_success(status_code):
        return body

    if status_code == 401:
        logger.debug("Request rejected with 401, credential not accepted")
        raise AuthenticationError()

    try:
        error_response = APIErrorResponse.model_validate_json(body)
    except ValidationError:
        logger.debug(
            f"Non-2xx response ({status_code}) without a structured error body"
        )
        raise UnknownError(f"Status code: {status_code}", status_code=status_code)

    raise ApiError(error_response, status_code=status_code)
