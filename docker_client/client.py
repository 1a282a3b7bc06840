"""
Docker Client - Main API entry point
"""

from typing import Optional

from .containers import ContainerCollection
from .execs import ExecCollection
from .http_client import DockerHTTPClient
from .images import ImageCollection
from .networks import NetworkCollection
from .settings_manager import SettingsManager
from .transport import Transport, transport_from_url
from .volumes import VolumeCollection


class DockerClient:
    """
    Docker API Client
    Speaks HTTP/1.1 directly over the daemon socket
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 60,
                 api_version: Optional[str] = None, transport: Optional[Transport] = None,
                 **transport_options):
        """
        Initialize Docker client

        Args:
            base_url: Docker host URL or socket path (default: auto-detect)
            timeout: Per-operation socket timeout in seconds
            api_version: Engine API version to pin, e.g. '1.41'
            transport: Ready-made transport; base_url and options are ignored when given
            **transport_options: host_header, buffer_size, max_header_bytes
        """
        if transport is None:
            transport = transport_from_url(base_url, timeout=timeout, **transport_options)

        self.http = DockerHTTPClient(transport, api_version=api_version or None)
        self.containers = ContainerCollection(self)
        self.images = ImageCollection(self)
        self.volumes = VolumeCollection(self)
        self.networks = NetworkCollection(self)
        self.execs = ExecCollection(self)

    @classmethod
    def from_settings(cls, settings: Optional[SettingsManager] = None) -> 'DockerClient':
        """Create a client from stored settings"""
        settings = settings or SettingsManager()
        return cls(
            base_url=settings.get('docker_host') or None,
            api_version=settings.get('api_version') or None,
            **settings.transport_options(),
        )

    @property
    def transport(self) -> Transport:
        return self.http.transport

    def version(self) -> dict:
        """Get Docker version info"""
        return self.http.json('GET', '/version')

    def info(self) -> dict:
        """Get Docker system info"""
        return self.http.json('GET', '/info')

    def ping(self) -> bool:
        """Ping Docker daemon"""
        return self.http.get('/_ping').body.strip() == 'OK'

    def __repr__(self):
        return f"<DockerClient: {self.transport}>"
