"""
Docker Engine API client - pure Python, raw HTTP/1.1 over the daemon socket
Works with the Docker daemon via Unix socket (Linux/macOS) or TCP
"""

from .client import DockerClient
from .exceptions import (
    DockerException,
    TransportError,
    DockerConnectionError,
    SendError,
    FramingError,
    TruncatedBody,
    ReadTimeout,
    APIError,
    BadParameters,
    NotFound,
    ContainerNotFound,
    ImageNotFound,
    NetworkNotFound,
    VolumeNotFound,
    ExecNotFound,
    Conflict,
    ContainerExists,
    NotRunning,
    ContainerPaused,
    NetworkExists,
    Busy,
    ServerError,
    UnknownStatus,
)
from .request import Method, Request, RequestBuilder
from .response import Response, ResponseReader
from .settings_manager import SettingsManager
from .transport import TCPTransport, Transport, UnixSocketTransport, transport_from_url
from .uri import URI, URIBuilder

__all__ = [
    'DockerClient',
    'URI',
    'URIBuilder',
    'Method',
    'Request',
    'RequestBuilder',
    'Response',
    'ResponseReader',
    'Transport',
    'UnixSocketTransport',
    'TCPTransport',
    'transport_from_url',
    'SettingsManager',
    'DockerException',
    'TransportError',
    'DockerConnectionError',
    'SendError',
    'FramingError',
    'TruncatedBody',
    'ReadTimeout',
    'APIError',
    'BadParameters',
    'NotFound',
    'ContainerNotFound',
    'ImageNotFound',
    'NetworkNotFound',
    'VolumeNotFound',
    'ExecNotFound',
    'Conflict',
    'ContainerExists',
    'NotRunning',
    'ContainerPaused',
    'NetworkExists',
    'Busy',
    'ServerError',
    'UnknownStatus',
]

__version__ = '1.0.0'
