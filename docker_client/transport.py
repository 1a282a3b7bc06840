"""
Socket transports for the Docker daemon
Unix socket (Linux/macOS) or plain TCP, one connection per request
"""

import logging
import os
import platform
import socket
from typing import Optional
from urllib.parse import urlparse

from .exceptions import DockerConnectionError, DockerException, SendError
from .request import DEFAULT_HOST, Request
from .response import Response, ResponseReader

logger = logging.getLogger(__name__)

DEFAULT_UNIX_SOCKET = '/var/run/docker.sock'
DEFAULT_TCP_PORT = 2375


class Transport:
    """Sends one request per fresh connection and decodes the response"""

    def __init__(self, timeout: float = 60, host_header: str = DEFAULT_HOST,
                 buffer_size: int = 1024, max_header_bytes: int = 65536):
        """
        Args:
            timeout: Connect/read/write deadline in seconds for each socket operation
            host_header: Value sent in the Host header
            buffer_size: Bytes requested per read
            max_header_bytes: Upper bound on the response header block
        """
        self.timeout = timeout
        self.host_header = host_header
        self.buffer_size = buffer_size
        self.max_header_bytes = max_header_bytes

    def connect(self) -> socket.socket:
        raise NotImplementedError

    def send(self, request: Request) -> Response:
        """
        Perform a single request/response exchange

        Args:
            request: Request to send

        Returns:
            Decoded Response

        Raises:
            DockerConnectionError: Connection could not be opened
            SendError: Request could not be encoded or fully written
            FramingError, TruncatedBody, ReadTimeout: Response could not be decoded
        """
        try:
            data = request.render(self.host_header)
        except UnicodeEncodeError as e:
            raise SendError(f"Request cannot be encoded: {e}") from e

        sock = self.connect()
        try:
            self._write_all(sock, data)
            reader = ResponseReader(
                sock,
                buffer_size=self.buffer_size,
                max_header_bytes=self.max_header_bytes,
            )
            return reader.read()
        finally:
            try:
                sock.close()
            except OSError:
                pass

    def _write_all(self, sock: socket.socket, data: bytes):
        view = memoryview(data)
        total = 0
        while total < len(data):
            try:
                sent = sock.send(view[total:])
            except OSError as e:
                raise SendError(f"Failed to send request: {e}") from e
            if sent == 0:
                raise SendError(f"Connection closed after {total} of {len(data)} request bytes")
            total += sent

    def _open(self, family: int, address) -> socket.socket:
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(address)
        except OSError as e:
            sock.close()
            raise DockerConnectionError(f"Cannot connect to Docker daemon at {self}: {e}") from e
        return sock


class UnixSocketTransport(Transport):
    """Transport over a Unix domain socket"""

    def __init__(self, socket_path: str = DEFAULT_UNIX_SOCKET, **kwargs):
        super().__init__(**kwargs)
        self.socket_path = socket_path

    def connect(self) -> socket.socket:
        return self._open(socket.AF_UNIX, self.socket_path)

    def __str__(self):
        return f"unix://{self.socket_path}"


class TCPTransport(Transport):
    """Transport over TCP"""

    def __init__(self, host: str = '127.0.0.1', port: int = DEFAULT_TCP_PORT, **kwargs):
        super().__init__(**kwargs)
        self.host = host
        self.port = port

    def connect(self) -> socket.socket:
        try:
            sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except OSError as e:
            raise DockerConnectionError(f"Cannot connect to Docker daemon at {self}: {e}") from e
        sock.settimeout(self.timeout)
        return sock

    def __str__(self):
        return f"tcp://{self.host}:{self.port}"


def detect_socket_path() -> str:
    """Default Docker socket path for this platform"""
    if platform.system() == "Darwin":  # macOS
        socket_path = os.path.expanduser('~/.docker/run/docker.sock')
        if os.path.exists(socket_path):
            return socket_path
    return DEFAULT_UNIX_SOCKET


def transport_from_url(base_url: Optional[str] = None, **kwargs) -> Transport:
    """
    Create a transport from a Docker host URL

    Args:
        base_url: unix:///path, a bare socket path, tcp://host:port or
            http://host:port. None means DOCKER_HOST or the platform default.
        **kwargs: Transport options (timeout, host_header, buffer_size, max_header_bytes)

    Returns:
        Transport instance
    """
    if not base_url:
        base_url = os.environ.get('DOCKER_HOST', '')
    if not base_url:
        socket_path = detect_socket_path()
        logger.debug(f"Using auto-detected Docker socket {socket_path}")
        return UnixSocketTransport(socket_path, **kwargs)

    if base_url.startswith('/'):
        return UnixSocketTransport(base_url, **kwargs)

    parsed = urlparse(base_url)
    if parsed.scheme == 'unix':
        # unix://var/run/docker.sock puts the first segment in netloc
        socket_path = parsed.netloc + parsed.path
        if socket_path and not socket_path.startswith('/'):
            socket_path = '/' + socket_path
        return UnixSocketTransport(socket_path or DEFAULT_UNIX_SOCKET, **kwargs)
    if parsed.scheme in ('tcp', 'http'):
        if not parsed.hostname:
            raise DockerException(f"Missing host in Docker URL: {base_url}")
        return TCPTransport(parsed.hostname, parsed.port or DEFAULT_TCP_PORT, **kwargs)

    raise DockerException(f"Unsupported Docker URL scheme: {base_url}")
