"""
HTTP transport layer for the OpenAI API
Default Transport implementation built on a pooled requests session
"""

import asyncio
import logging
import time
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.structures import CaseInsensitiveDict

from openai_sdk.client.classifier import classify_response
from openai_sdk.client.codec import (
    JSON_CONTENT_TYPE,
    encode_multipart,
    generate_boundary,
    multipart_content_type,
)
from openai_sdk.client.transport import HttpMethod, MultipartFormData, Transport
from openai_sdk.config.openai_config import OpenAIConfig
from openai_sdk.exceptions import NetworkError
from openai_sdk.utils.redaction import redact_sensitive_data


logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
ORGANIZATION_HEADER = "OpenAI-Organization"
CONTENT_TYPE_HEADER = "Content-Type"


class RequestsTransport(Transport):
    """
    Transport backed by ``requests``

    The blocking HTTP exchange runs in a worker thread so awaiting callers
    never block the event loop. The session is pooled and shared by all
    in-flight calls; urllib3 retries are disabled.

    Header precedence for JSON requests: defaults first, then caller
    extras, then ``Authorization`` is set again so exactly one credential
    header is sent. For multipart requests the boundary content type is
    set last.

    Example:
        >>> transport = RequestsTransport()
        >>> client = OpenAIClient(config, transport=transport)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        pool_maxsize: int = 10,
    ) -> None:
        """
        Create a new transport

        Args:
            session: Optional pre-configured session
            pool_maxsize: Connection pool size per host
        """
        self._session = session or self._create_session(pool_maxsize)

    def _create_session(self, pool_maxsize: int) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=pool_maxsize,
            pool_maxsize=pool_maxsize,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _default_headers(self, config: OpenAIConfig) -> CaseInsensitiveDict:
        headers: CaseInsensitiveDict = CaseInsensitiveDict()
        headers[AUTHORIZATION_HEADER] = f"Bearer {config.api_key}"
        headers["Accept"] = JSON_CONTENT_TYPE
        if config.organization:
            headers[ORGANIZATION_HEADER] = config.organization
        return headers

    def build_request(
        self,
        path: str,
        method: HttpMethod,
        body: Optional[bytes],
        headers: Dict[str, str],
        config: OpenAIConfig,
    ) -> requests.Request:
        """Build the outbound request for a JSON call"""
        merged = self._default_headers(config)
        merged[CONTENT_TYPE_HEADER] = JSON_CONTENT_TYPE
        merged.update(headers)
        merged[AUTHORIZATION_HEADER] = f"Bearer {config.api_key}"

        return requests.Request(
            method=method.value,
            url=config.build_url(path),
            headers=merged,
            data=body,
        )

    def build_multipart_request(
        self,
        path: str,
        form_data: MultipartFormData,
        config: OpenAIConfig,
        boundary: Optional[str] = None,
    ) -> requests.Request:
        """Build the outbound request for a multipart upload"""
        boundary = boundary or generate_boundary()

        headers = self._default_headers(config)
        headers[CONTENT_TYPE_HEADER] = multipart_content_type(boundary)

        return requests.Request(
            method=HttpMethod.POST.value,
            url=config.build_url(path),
            headers=headers,
            data=encode_multipart(form_data, boundary),
        )

    async def perform_request(
        self,
        path: str,
        method: HttpMethod,
        body: Optional[bytes],
        headers: Dict[str, str],
        config: OpenAIConfig,
    ) -> bytes:
        request = self.build_request(path, method, body, headers, config)
        return await asyncio.to_thread(self._execute, request, config)

    async def perform_multipart(
        self,
        path: str,
        form_data: MultipartFormData,
        config: OpenAIConfig,
    ) -> bytes:
        request = self.build_multipart_request(path, form_data, config)
        return await asyncio.to_thread(self._execute, request, config)

    def _execute(self, request: requests.Request, config: OpenAIConfig) -> bytes:
        """Send a prepared request and classify the response"""
        prepared = self._session.prepare_request(request)
        start_time = time.time()

        logger.debug(
            f"{prepared.method} {prepared.url} "
            f"headers={redact_sensitive_data(dict(prepared.headers))}"
        )

        try:
            response = self._session.send(prepared, timeout=config.timeout)
        except requests.exceptions.RequestException as e:
            error = self._normalize_error(e)
            logger.debug(f"{prepared.method} {prepared.url} failed: {error}")
            raise error from e

        duration = int((time.time() - start_time) * 1000)
        logger.debug(
            f"{prepared.method} {prepared.url} -> {response.status_code} "
            f"({duration}ms)"
        )

        return classify_response(response.status_code, response.content)

    def _normalize_error(
        self, error: requests.exceptions.RequestException
    ) -> NetworkError:
        """Map a requests exception onto a NetworkError"""
        if isinstance(error, requests.exceptions.Timeout):
            return NetworkError.timeout(error)

        if isinstance(error, requests.exceptions.SSLError):
            return NetworkError.ssl_error(error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return NetworkError.connection_failed(error)

        return NetworkError(f"Request error: {error}", cause=error)

    async def close(self) -> None:
        self._session.close()
