"""Base class for endpoint services"""

from typing import TYPE_CHECKING, Any, Coroutine, List, Sequence, Union

from openai_sdk.client.callbacks import Callback, CallHandle, submit
from openai_sdk.exceptions import InvalidRequestError

if TYPE_CHECKING:
    from openai_sdk.client.openai_client import OpenAIClient


class BaseService:
    """
    Endpoint service

    Holds only a reference back to the client it was created by; every
    request goes through the client's send methods.
    """

    def __init__(self, client: "OpenAIClient") -> None:
        self._client = client

    @property
    def client(self) -> "OpenAIClient":
        return self._client

    def _submit(
        self, operation: Coroutine[Any, Any, Any], callback: Callback
    ) -> CallHandle:
        return submit(operation, callback)


def require_text(value: str, field: str) -> None:
    """Reject empty or whitespace-only text"""
    if not value or not value.strip():
        raise InvalidRequestError(f"{field} must not be empty", field=field)


def normalize_inputs(value: Union[str, Sequence[str]], field: str) -> List[str]:
    """Accept a single string or a list of strings, rejecting empty input"""
    inputs = [value] if isinstance(value, str) else list(value)
    if not inputs:
        raise InvalidRequestError(f"{field} must not be empty", field=field)
    for item in inputs:
        require_text(item, field)
    return inputs
