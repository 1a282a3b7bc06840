"""
HTTP/1.1 response decoder

Reads a response from a byte stream using Content-Length framing only.
There is no keep-alive, so one decoder instance reads exactly one response.
"""

import json
import logging
import socket
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import FramingError, ReadTimeout, TransportError, TruncatedBody

logger = logging.getLogger(__name__)

HEADER_BOUNDARY = b'\r\n\r\n'

# Statuses that never carry a body, whatever Content-Length says
NO_BODY_STATUSES = (204, 304)


@dataclass(frozen=True)
class Response:
    """Status, headers and body of one HTTP response"""

    status: int
    reason: str = ''
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b''
    content_length: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    @property
    def body(self) -> str:
        return self.content.decode('utf-8', errors='replace')

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup"""
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return default

    def json(self) -> Any:
        """Decode the body as JSON, None for an empty body"""
        if not self.content.strip():
            return None
        return json.loads(self.body)

    @classmethod
    def parse(cls, raw: bytes, **options) -> 'Response':
        """Decode a complete response held in memory"""
        return ResponseReader(_BufferStream(raw), **options).read()


class _BufferStream:
    """recv() over an in-memory buffer"""

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    def recv(self, size: int) -> bytes:
        chunk = self._data[self._pos:self._pos + size]
        self._pos += len(chunk)
        return chunk


def parse_status_line(line: str) -> Tuple[int, str]:
    """
    Parse 'HTTP/<version> <code> <reason>'

    Returns:
        (status code, reason phrase)

    Raises:
        FramingError: If the line is not a valid status line
    """
    parts = line.split(' ', 2)
    if len(parts) < 2 or not parts[0].startswith('HTTP/'):
        raise FramingError(f"Malformed status line: {line!r}")

    code = parts[1]
    if len(code) != 3 or not code.isdigit():
        raise FramingError(f"Malformed status code in status line: {line!r}")

    reason = parts[2].strip() if len(parts) == 3 else ''
    return int(code), reason


def parse_headers(lines) -> Dict[str, str]:
    headers = {}
    for line in lines:
        if ':' not in line:
            continue
        key, value = line.split(':', 1)
        headers[key.strip()] = value.strip()
    return headers


class ResponseReader:
    """Decodes one response from a stream exposing recv()"""

    def __init__(self, stream, buffer_size: int = 1024, max_header_bytes: int = 65536):
        """
        Args:
            stream: Connected socket or any object with recv(size) -> bytes
            buffer_size: Bytes requested per recv() call
            max_header_bytes: Give up if no header boundary appears within this many bytes
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self.max_header_bytes = max_header_bytes

    def _recv(self) -> bytes:
        try:
            return self.stream.recv(self.buffer_size)
        except (socket.timeout, TimeoutError) as e:
            raise ReadTimeout(f"Timed out waiting for response: {e}") from e
        except OSError as e:
            raise TransportError(f"Error reading response: {e}") from e

    def _read_head(self) -> bytes:
        buf = bytearray()
        while HEADER_BOUNDARY not in buf:
            if len(buf) > self.max_header_bytes:
                raise FramingError(
                    f"No header boundary within {self.max_header_bytes} bytes"
                )
            chunk = self._recv()
            if not chunk:
                if not buf:
                    raise FramingError("Connection closed before any response data")
                raise FramingError("Connection closed before end of response headers")
            buf.extend(chunk)
        return bytes(buf)

    def read(self) -> Response:
        """
        Read status line, headers and a Content-Length framed body

        Returns:
            Response

        Raises:
            FramingError: Missing header boundary, bad status line or length, chunked body
            TruncatedBody: Peer closed before the declared length was read
            ReadTimeout: A read hit the socket deadline
        """
        raw = self._read_head()
        head, _, rest = raw.partition(HEADER_BOUNDARY)

        lines = head.decode('iso-8859-1').split('\r\n')
        status, reason = parse_status_line(lines[0])
        headers = parse_headers(lines[1:])
        response = Response(status=status, reason=reason, headers=headers)

        if status in NO_BODY_STATUSES:
            return response

        if 'chunked' in (response.header('Transfer-Encoding') or '').lower():
            raise FramingError("Chunked transfer-encoding is not supported")

        declared = response.header('Content-Length')
        if declared is None:
            # Only Content-Length framing is supported, so no length means no body
            if rest:
                logger.debug(f"Discarding {len(rest)} bytes of a response without Content-Length")
            return response

        try:
            length = int(declared)
        except ValueError as e:
            raise FramingError(f"Invalid Content-Length: {declared!r}") from e
        if length < 0:
            raise FramingError(f"Invalid Content-Length: {declared!r}")

        body = bytearray(rest)
        while len(body) < length:
            chunk = self._recv()
            if not chunk:
                raise TruncatedBody(
                    f"Connection closed after {len(body)} of {length} body bytes",
                    expected=length,
                    received=len(body),
                )
            body.extend(chunk)

        if len(body) > length:
            logger.debug(f"Discarding {len(body) - length} bytes past Content-Length")

        return Response(status, reason, headers, bytes(body[:length]), length)
