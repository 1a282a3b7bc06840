"""
Docker Volumes API
"""

from typing import Any, Dict, List, Optional

from .exceptions import Busy, VolumeNotFound
from .models import PruneReport


class Volume:
    """Docker Volume object"""

    def __init__(self, attrs: Dict[str, Any], client):
        self.attrs = attrs
        self.client = client
        self.name = attrs.get('Name', '')
        self.driver = attrs.get('Driver', '')
        self.mountpoint = attrs.get('Mountpoint', '')
        self.created = attrs.get('CreatedAt', '')
        self.scope = attrs.get('Scope', '')
        # Daemon sends null for empty maps
        self.labels = attrs.get('Labels') or {}
        self.options = attrs.get('Options') or {}
        self.status = attrs.get('Status') or {}
        self.usage_data = attrs.get('UsageData')

    @property
    def id(self) -> str:
        return self.name

    def __repr__(self):
        return f"<Volume: {self.name}>"

    def remove(self, force: bool = False):
        """Remove this volume"""
        return self.client.remove(self.name, force=force)


class VolumeCollection:
    """Docker Volumes collection"""

    def __init__(self, client):
        self.client = client
        self.warnings: List[str] = []

    @property
    def http(self):
        return self.client.http

    def create(self, name: Optional[str] = None, driver: Optional[str] = None,
               driver_opts: Optional[Dict[str, str]] = None,
               labels: Optional[Dict[str, str]] = None) -> Volume:
        """
        Create volume

        Args:
            name: Volume name; the daemon generates one when omitted
            driver: Volume driver (daemon default: local)
            driver_opts: Driver specific options
            labels: Volume labels

        Returns:
            Volume object
        """
        config = {}
        if name:
            config['Name'] = name
        if driver:
            config['Driver'] = driver
        if driver_opts:
            config['DriverOpts'] = driver_opts
        if labels:
            config['Labels'] = labels

        data = self.http.json('POST', '/volumes/create', data=config, expect=(201,))
        return Volume(data, self)

    def get(self, name: str) -> Volume:
        """
        Inspect volume

        Raises:
            VolumeNotFound: If volume not found
        """
        data = self.http.json('GET', f'/volumes/{name}', errors={404: VolumeNotFound})
        return Volume(data, self)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Volume]:
        """
        List volumes

        Warnings returned by the daemon are kept in `self.warnings`.
        """
        data = self.http.json('GET', '/volumes', params={'filters': filters or None}) or {}
        self.warnings = data.get('Warnings') or []
        return [Volume(v_data, self) for v_data in data.get('Volumes') or []]

    def remove(self, name: str, force: bool = False):
        """
        Remove volume

        Raises:
            VolumeNotFound: If volume not found
            Busy: If the volume is in use by a container
        """
        self.http.delete(
            f'/volumes/{name}',
            params={'force': force},
            expect=(204,),
            errors={404: VolumeNotFound, 409: Busy},
        )

    def prune(self, filters: Optional[Dict[str, Any]] = None) -> PruneReport:
        """Remove unused volumes"""
        data = self.http.json('POST', '/volumes/prune', params={'filters': filters or None})
        return PruneReport.from_dict(data, 'VolumesDeleted')
