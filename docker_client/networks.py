"""
Docker Networks API
"""

from typing import Any, Dict, List, Optional

from .exceptions import NetworkExists, NetworkNotFound
from .models import PruneReport


class IPAMConfig:
    """IP address management block for network creation"""

    def __init__(self, driver: str = 'default', options: Optional[Dict[str, str]] = None):
        self.driver = driver
        self.pools: List[Dict[str, str]] = []
        self.options = dict(options or {})

    def add_pool(self, subnet: Optional[str] = None, gateway: Optional[str] = None,
                 ip_range: Optional[str] = None) -> 'IPAMConfig':
        pool = {}
        if subnet:
            pool['Subnet'] = subnet
        if gateway:
            pool['Gateway'] = gateway
        if ip_range:
            pool['IPRange'] = ip_range
        self.pools.append(pool)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Driver': self.driver,
            'Config': list(self.pools),
            'Options': dict(self.options),
        }


class Network:
    """Docker Network object"""

    def __init__(self, attrs: Dict[str, Any], client):
        self.attrs = attrs
        self.client = client
        self.id = attrs.get('Id', '')
        self.short_id = self.id[:12]
        self.name = attrs.get('Name', '')
        self.driver = attrs.get('Driver', '')
        self.scope = attrs.get('Scope', '')
        self.containers = attrs.get('Containers') or {}

    def __repr__(self):
        return f"<Network: {self.name or self.short_id}>"

    def connect(self, container: str):
        """Connect a container to this network"""
        return self.client.connect(self.id, container)

    def disconnect(self, container: str, force: bool = False):
        """Disconnect a container from this network"""
        return self.client.disconnect(self.id, container, force=force)

    def remove(self):
        """Remove network"""
        return self.client.remove(self.id)


class NetworkCollection:
    """Docker Networks Collection"""

    def __init__(self, client):
        self.client = client

    @property
    def http(self):
        return self.client.http

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Network]:
        """
        List networks

        Args:
            filters: dict of filters (e.g., {'name': ['mynet']})

        Returns:
            List of Network objects
        """
        data = self.http.json('GET', '/networks', params={'filters': filters or None})
        return [Network(net, self) for net in data or []]

    def get(self, network_id: str, verbose: bool = False, scope: Optional[str] = None) -> Network:
        """
        Inspect network by ID or name

        Args:
            network_id: Network ID or name
            verbose: Include service details for swarm networks
            scope: Restrict lookup to 'swarm', 'global' or 'local'

        Raises:
            NetworkNotFound: If network not found
        """
        data = self.http.json(
            'GET', f'/networks/{network_id}',
            params={'verbose': verbose or None, 'scope': scope},
            errors={404: NetworkNotFound},
        )
        return Network(data, self)

    def create(self, name: str, driver: str = 'bridge', internal: bool = False,
               attachable: bool = False, ingress: bool = False, enable_ipv6: bool = False,
               ipam: Optional[IPAMConfig] = None, options: Optional[Dict[str, str]] = None,
               labels: Optional[Dict[str, str]] = None, check_duplicate: bool = True) -> Network:
        """
        Create network

        Args:
            name: Network name
            driver: Network driver
            internal: Restrict external access to the network
            attachable: Allow manual container attachment
            ingress: Swarm routing-mesh network
            enable_ipv6: Enable IPv6
            ipam: IP address management config
            options: Driver options
            labels: Network labels
            check_duplicate: Refuse to create a network with an existing name

        Returns:
            Network object

        Raises:
            NetworkExists: If a network with this name exists
        """
        data = {
            'Name': name,
            'CheckDuplicate': check_duplicate,
            'Driver': driver,
            'Internal': internal,
            'Attachable': attachable,
            'Ingress': ingress,
            'EnableIPv6': enable_ipv6,
            'IPAM': (ipam or IPAMConfig()).to_dict(),
            'Options': options or {},
            'Labels': labels or {},
        }

        result = self.http.json(
            'POST', '/networks/create',
            data=data,
            expect=(201,),
            errors={409: NetworkExists},
        )
        return self.get(result['Id'])

    def connect(self, network_id: str, container: str):
        """
        Connect container to network

        Raises:
            NotFound: If the network or the container does not exist
        """
        self.http.post(
            f'/networks/{network_id}/connect',
            data={'Container': container},
            expect=(200,),
        )

    def disconnect(self, network_id: str, container: str, force: bool = False):
        """Disconnect container from network"""
        self.http.post(
            f'/networks/{network_id}/disconnect',
            data={'Container': container, 'Force': force},
            expect=(200,),
        )

    def remove(self, network_id: str):
        """Remove network"""
        self.http.delete(
            f'/networks/{network_id}',
            expect=(204,),
            errors={404: NetworkNotFound},
        )

    def prune(self, filters: Optional[Dict[str, Any]] = None) -> PruneReport:
        """
        Remove unused networks

        Returns:
            PruneReport with the deleted network names
        """
        data = self.http.json('POST', '/networks/prune', params={'filters': filters or None})
        return PruneReport.from_dict(data, 'NetworksDeleted')
