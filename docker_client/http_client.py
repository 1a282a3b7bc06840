"""
HTTP dispatcher for the Docker Engine API
Builds requests, sends them through a transport and maps status codes to exceptions
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Type

from .exceptions import APIError, check_status
from .request import Method, Request
from .response import Response
from .transport import Transport
from .uri import URI

logger = logging.getLogger(__name__)


class DockerHTTPClient:
    """HTTP client for Docker daemon"""

    def __init__(self, transport: Transport, api_version: Optional[str] = None):
        """
        Initialize Docker HTTP client

        Args:
            transport: Transport used for every exchange
            api_version: Engine API version (e.g. '1.41'); paths are prefixed with /v<version>
        """
        self.transport = transport
        self.api_version = api_version

    def _path(self, path: str) -> str:
        if self.api_version:
            return f"/v{self.api_version}{path}"
        return path

    def build_request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                      data: Any = None, headers: Optional[Dict[str, str]] = None) -> Request:
        """
        Build a request without sending it

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path without version prefix
            params: URL query parameters; None values are dropped
            data: JSON body (POST only)
            headers: Extra HTTP headers

        Returns:
            Request
        """
        uri = URI.with_path(self._path(path)).parameters(params).build()

        builder = Request.builder().method(Method(method)).url(uri)
        for key, value in (headers or {}).items():
            builder.header(key, value)
        if data is not None:
            builder.content(json.dumps(data))

        return builder.build()

    def request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                data: Any = None, headers: Optional[Dict[str, str]] = None,
                expect: Iterable[int] = (200,),
                errors: Optional[Dict[int, Type[APIError]]] = None) -> Response:
        """
        Make HTTP request to Docker daemon

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path
            params: URL query parameters
            data: JSON data for request body
            headers: HTTP headers
            expect: Status codes treated as success
            errors: Status code -> exception class for this endpoint

        Returns:
            Response with an expected status
        """
        request = self.build_request(method, path, params=params, data=data, headers=headers)
        response = self.transport.send(request)
        logger.debug(f"{request.method.value} {request.uri} -> {response.status}")
        return check_status(response, expect=expect, errors=errors)

    def json(self, method: str, path: str, **kwargs) -> Any:
        """Make request and decode the JSON body"""
        return self.request(method, path, **kwargs).json()

    def get(self, path: str, **kwargs) -> Response:
        """Make GET request"""
        return self.request('GET', path, **kwargs)

    def post(self, path: str, **kwargs) -> Response:
        """Make POST request"""
        return self.request('POST', path, **kwargs)

    def delete(self, path: str, **kwargs) -> Response:
        """Make DELETE request"""
        return self.request('DELETE', path, **kwargs)
