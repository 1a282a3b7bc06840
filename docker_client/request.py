"""
HTTP/1.1 request encoder
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .uri import URI

DEFAULT_HOST = '127.0.0.1'

# Emitted by render() itself, never taken from caller headers
MANAGED_HEADERS = ('host', 'content-length', 'content-type')


class Method(str, Enum):
    """HTTP methods used by the Engine API client"""

    GET = 'GET'
    POST = 'POST'
    DELETE = 'DELETE'


@dataclass(frozen=True)
class Request:
    """A single HTTP request, immutable once built"""

    method: Method = Method.GET
    uri: URI = field(default_factory=URI)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    @classmethod
    def builder(cls) -> 'RequestBuilder':
        return RequestBuilder()

    @classmethod
    def get(cls) -> 'RequestBuilder':
        return RequestBuilder(Method.GET)

    @classmethod
    def post(cls) -> 'RequestBuilder':
        return RequestBuilder(Method.POST)

    @classmethod
    def delete(cls) -> 'RequestBuilder':
        return RequestBuilder(Method.DELETE)

    def render(self, host: str = DEFAULT_HOST) -> bytes:
        """
        Render the request as it goes on the wire

        Args:
            host: Value of the Host header. The peer is a local daemon, so a
                loopback placeholder is enough.

        Returns:
            Request line, headers, blank line and body as bytes
        """
        payload = self.body.encode('utf-8')

        lines = [f"{self.method.value} {self.uri} HTTP/1.1"]
        for key, value in self.headers.items():
            if key.lower() in MANAGED_HEADERS:
                continue
            lines.append(f"{key}: {value}")
        lines.append(f"Host: {host}")

        if self.method is Method.POST and payload:
            lines.append(f"Content-Length: {len(payload)}")
            lines.append('Content-Type: application/json')

        head = '\r\n'.join(lines) + '\r\n\r\n'
        return head.encode('latin-1') + payload

    def __str__(self):
        return self.render().decode('utf-8', errors='replace')


def _has_line_break(text: str) -> bool:
    return '\r' in text or '\n' in text


class RequestBuilder:
    """Accumulates method, URI, headers and body for a Request"""

    def __init__(self, method: Method = Method.GET):
        self._method = Method(method)
        self._uri = URI()
        self._headers: Dict[str, str] = {}
        self._content = ''

    def method(self, method: Method) -> 'RequestBuilder':
        self._method = Method(method)
        return self

    def url(self, uri: URI) -> 'RequestBuilder':
        self._uri = uri
        return self

    def header(self, key: str, value: str) -> 'RequestBuilder':
        """
        Add a header

        Raises:
            ValueError: If the name or value would break the header block
        """
        value = str(value)
        if not key or ':' in key or _has_line_break(key) or _has_line_break(value):
            raise ValueError(f"Invalid header: {key!r}: {value!r}")
        try:
            key.encode('latin-1')
            value.encode('latin-1')
        except UnicodeEncodeError as e:
            raise ValueError(f"Header {key!r} is not latin-1 encodable") from e
        self._headers[key] = value
        return self

    def content(self, body: Optional[str]) -> 'RequestBuilder':
        self._content = body or ''
        return self

    def build(self) -> Request:
        """
        Freeze the builder into a Request

        Raises:
            ValueError: If a GET or DELETE request was given a body
        """
        if self._content and self._method is not Method.POST:
            raise ValueError(f"{self._method.value} requests cannot carry a body")

        return Request(
            method=self._method,
            uri=self._uri,
            headers=dict(self._headers),
            body=self._content,
        )
