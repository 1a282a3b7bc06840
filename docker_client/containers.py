"""
Docker Containers API
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .exceptions import ContainerExists, ContainerNotFound, ImageNotFound, NotRunning
from .models import PruneReport


class ContainerFilters:
    """Builder for the container list 'filters' parameter"""

    def __init__(self):
        self._labels: Dict[str, Optional[str]] = {}

    def label(self, key: str, value: Optional[str] = None) -> 'ContainerFilters':
        """Match containers with label `key`, or `key=value` when a value is given"""
        self._labels[key] = value
        return self

    def to_dict(self) -> Dict[str, List[str]]:
        if not self._labels:
            return {}
        return {
            'label': [key if value is None else f"{key}={value}"
                      for key, value in self._labels.items()]
        }


@dataclass(frozen=True)
class FSChange:
    """One filesystem change reported by /containers/{id}/changes"""

    MODIFIED = 0
    ADDED = 1
    DELETED = 2

    path: str
    kind: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FSChange':
        return cls(path=data.get('Path', ''), kind=data.get('Kind', 0))


class Container:
    """Docker Container object"""

    def __init__(self, attrs: Dict[str, Any], client):
        self.attrs = attrs
        self.client = client
        self.id = attrs.get('Id', '')
        self.short_id = self.id[:12] if self.id else ''
        self.name = attrs.get('Name', attrs.get('Names', [''])[0] if attrs.get('Names') else '').lstrip('/')

        # Inspect returns State as an object, list returns it as a string
        state = attrs.get('State', {})
        if isinstance(state, dict):
            self.status = state.get('Status', 'unknown')
        else:
            self.status = state if isinstance(state, str) and state else attrs.get('Status', 'unknown')

        self.image = attrs.get('Image', attrs.get('ImageID', ''))
        self.labels = attrs.get('Labels') or attrs.get('Config', {}).get('Labels') or {}

    def __repr__(self):
        return f"<Container: {self.name or self.short_id}>"

    def start(self):
        """Start this container"""
        return self.client.start(self.id)

    def stop(self, timeout: Optional[int] = None):
        """Stop this container"""
        return self.client.stop(self.id, timeout=timeout)

    def kill(self, signal: Optional[str] = None):
        """Kill this container"""
        return self.client.kill(self.id, signal=signal)

    def remove(self, force: bool = False, v: bool = False):
        """Remove this container"""
        return self.client.remove(self.id, force=force, v=v)


class ContainerCollection:
    """Docker Containers collection"""

    def __init__(self, client):
        self.client = client

    @property
    def http(self):
        return self.client.http

    def list(self, all: bool = False, limit: Optional[int] = None, size: bool = False,
             filters: Optional[Union[Dict[str, Any], ContainerFilters]] = None) -> List[Container]:
        """
        List containers

        Args:
            all: Show all containers (including stopped)
            limit: Maximum number of containers to return
            size: Return container sizes
            filters: Filters to apply

        Returns:
            List of Container objects
        """
        if isinstance(filters, ContainerFilters):
            filters = filters.to_dict()

        params = {'all': all, 'limit': limit, 'size': size or None, 'filters': filters or None}
        data = self.http.json('GET', '/containers/json', params=params)
        return [Container(c_data, self) for c_data in data or []]

    def get(self, container_id: str, size: bool = False) -> Container:
        """
        Inspect container by ID or name

        Raises:
            ContainerNotFound: If container not found
        """
        data = self.http.json(
            'GET', f'/containers/{container_id}/json',
            params={'size': size},
            errors={404: ContainerNotFound},
        )
        return Container(data, self)

    def create(self, image: str, name: Optional[str] = None,
               command: Optional[Union[str, List[str]]] = None,
               environment: Optional[Dict[str, str]] = None,
               volumes: Optional[Dict[str, Dict[str, str]]] = None,
               ports: Optional[Dict[str, int]] = None,
               labels: Optional[Dict[str, str]] = None,
               stdin_open: bool = False, tty: bool = False,
               network_mode: Optional[str] = None, hostname: Optional[str] = None,
               auto_remove: bool = False, platform: Optional[str] = None,
               **kwargs) -> Container:
        """
        Create container

        Args:
            image: Image name or ID
            name: Container name
            command: Command to run; a string is run through 'sh -c'
            environment: Environment variables
            volumes: Volume mounts {host_path: {'bind': container_path, 'mode': 'rw'}}
            ports: Port bindings {container_port: host_port}
            labels: Container labels
            stdin_open: Keep STDIN open
            tty: Allocate TTY
            network_mode: Network mode
            hostname: Container hostname
            auto_remove: Auto-remove when stopped
            platform: Platform (e.g., linux/amd64)
            **kwargs: Extra top-level fields merged into the config

        Returns:
            Created Container object

        Raises:
            ImageNotFound: If the image does not exist locally
            ContainerExists: If the name is already taken
        """
        config = {
            'Image': image,
            'Tty': tty,
            'OpenStdin': stdin_open,
            'StdinOnce': False,
            'AttachStdin': stdin_open,
            'AttachStdout': True,
            'AttachStderr': True,
        }

        if command:
            if isinstance(command, str):
                config['Cmd'] = ['sh', '-c', command]
            else:
                config['Cmd'] = list(command)

        if environment:
            config['Env'] = [f"{k}={v}" for k, v in environment.items()]

        if hostname:
            config['Hostname'] = hostname

        if labels:
            config['Labels'] = labels

        host_config = {}

        if auto_remove:
            host_config['AutoRemove'] = auto_remove

        if network_mode:
            host_config['NetworkMode'] = network_mode

        if volumes:
            binds = []
            for host_path, mount_info in volumes.items():
                container_path = mount_info.get('bind', '')
                mode = mount_info.get('mode', 'rw')
                binds.append(f"{host_path}:{container_path}:{mode}")
            host_config['Binds'] = binds

        if ports:
            port_bindings = {}
            exposed_ports = {}
            for container_port, host_port in ports.items():
                port_key = str(container_port) if '/' in str(container_port) else f"{container_port}/tcp"
                exposed_ports[port_key] = {}
                port_bindings[port_key] = [{'HostPort': str(host_port)}]
            config['ExposedPorts'] = exposed_ports
            host_config['PortBindings'] = port_bindings

        if host_config:
            config['HostConfig'] = host_config

        config.update(kwargs)

        result = self.http.json(
            'POST', '/containers/create',
            params={'name': name, 'platform': platform},
            data=config,
            expect=(201,),
            errors={404: ImageNotFound, 409: ContainerExists},
        )
        return self.get(result['Id'])

    def changes(self, container_id: str) -> List[FSChange]:
        """Filesystem changes of a container"""
        data = self.http.json(
            'GET', f'/containers/{container_id}/changes',
            errors={404: ContainerNotFound},
        )
        return [FSChange.from_dict(item) for item in data or []]

    def top(self, container_id: str, ps_args: Optional[str] = None) -> Dict[str, Any]:
        """
        List processes running inside a container

        Returns:
            Dict with 'Titles' and 'Processes'
        """
        return self.http.json(
            'GET', f'/containers/{container_id}/top',
            params={'ps_args': ps_args or None},
            errors={404: ContainerNotFound},
        )

    def start(self, container_id: str):
        """Start container; an already started container is not an error"""
        self.http.post(
            f'/containers/{container_id}/start',
            expect=(204, 304),
            errors={404: ContainerNotFound},
        )

    def stop(self, container_id: str, timeout: Optional[int] = None):
        """Stop container; an already stopped container is not an error"""
        self.http.post(
            f'/containers/{container_id}/stop',
            params={'t': timeout},
            expect=(204, 304),
            errors={404: ContainerNotFound},
        )

    def restart(self, container_id: str, timeout: Optional[int] = None):
        """Restart container"""
        self.http.post(
            f'/containers/{container_id}/restart',
            params={'t': timeout},
            expect=(204,),
            errors={404: ContainerNotFound},
        )

    def pause(self, container_id: str):
        """Pause all processes in a container"""
        self.http.post(
            f'/containers/{container_id}/pause',
            expect=(204,),
            errors={404: ContainerNotFound},
        )

    def unpause(self, container_id: str):
        """Resume a paused container"""
        self.http.post(
            f'/containers/{container_id}/unpause',
            expect=(204,),
            errors={404: ContainerNotFound},
        )

    def rename(self, container_id: str, name: str):
        """Rename container"""
        self.http.post(
            f'/containers/{container_id}/rename',
            params={'name': name},
            expect=(204,),
            errors={404: ContainerNotFound, 409: ContainerExists},
        )

    def kill(self, container_id: str, signal: Optional[str] = None):
        """Kill container, SIGKILL unless another signal is given"""
        self.http.post(
            f'/containers/{container_id}/kill',
            params={'signal': signal},
            expect=(204,),
            errors={404: ContainerNotFound, 409: NotRunning},
        )

    def remove(self, container_id: str, v: bool = False, force: bool = False, link: bool = False):
        """
        Remove container

        Args:
            container_id: Container ID or name
            v: Remove anonymous volumes of the container
            force: Kill a running container before removing it
            link: Remove the link instead of the container
        """
        self.http.delete(
            f'/containers/{container_id}',
            params={'v': v, 'force': force, 'link': link},
            expect=(204,),
            errors={404: ContainerNotFound},
        )

    def prune(self, filters: Optional[Dict[str, Any]] = None) -> PruneReport:
        """Remove stopped containers"""
        data = self.http.json('POST', '/containers/prune', params={'filters': filters or None})
        return PruneReport.from_dict(data, 'ContainersDeleted')
