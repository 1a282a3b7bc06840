"""
Docker Exec API
"""

from typing import Any, Dict, List, Optional, Union

from .exceptions import ContainerNotFound, ContainerPaused, ExecNotFound


class ExecInstance:
    """Docker exec instance"""

    def __init__(self, attrs: Dict[str, Any], client):
        self.attrs = attrs
        self.client = client
        self.id = attrs.get('ID', attrs.get('Id', ''))
        self.container_id = attrs.get('ContainerID', '')
        self.running = attrs.get('Running', False)
        self.exit_code = attrs.get('ExitCode')
        self.pid = attrs.get('Pid', 0)

    def __repr__(self):
        return f"<ExecInstance: {self.id[:12]}>"

    def start(self, tty: bool = False):
        """Start this exec instance detached"""
        return self.client.start(self.id, tty=tty)

    def reload(self) -> 'ExecInstance':
        """Fetch the current state of this exec instance"""
        return self.client.get(self.id)


class ExecCollection:
    """Docker exec instances"""

    def __init__(self, client):
        self.client = client

    @property
    def http(self):
        return self.client.http

    def create(self, container: str, cmd: Union[str, List[str]], user: str = '',
               attach_stdin: bool = False, attach_stdout: bool = True,
               attach_stderr: bool = True, tty: bool = False, privileged: bool = False,
               environment: Optional[Dict[str, str]] = None,
               workdir: str = '') -> ExecInstance:
        """
        Create an exec instance in a running container

        Args:
            container: Container ID or name
            cmd: Command to execute; a string is run through 'sh -c'
            user: User to run as
            attach_stdin: Attach to stdin
            attach_stdout: Attach to stdout
            attach_stderr: Attach to stderr
            tty: Allocate TTY
            privileged: Run as privileged
            environment: Environment variables
            workdir: Working directory

        Returns:
            ExecInstance holding only the new ID; call reload() for details

        Raises:
            ContainerNotFound: If the container does not exist
            ContainerPaused: If the container is paused
        """
        exec_config = {
            'AttachStdin': attach_stdin,
            'AttachStdout': attach_stdout,
            'AttachStderr': attach_stderr,
            'Tty': tty,
            'Privileged': privileged,
            'Cmd': cmd if isinstance(cmd, list) else ['sh', '-c', cmd],
        }

        if user:
            exec_config['User'] = user
        if environment:
            exec_config['Env'] = [f"{k}={v}" for k, v in environment.items()]
        if workdir:
            exec_config['WorkingDir'] = workdir

        result = self.http.json(
            'POST', f'/containers/{container}/exec',
            data=exec_config,
            expect=(201,),
            errors={404: ContainerNotFound, 409: ContainerPaused},
        )
        return ExecInstance(result, self)

    def get(self, exec_id: str) -> ExecInstance:
        """
        Inspect exec instance

        Raises:
            ExecNotFound: If the exec instance does not exist
        """
        data = self.http.json('GET', f'/exec/{exec_id}/json', errors={404: ExecNotFound})
        return ExecInstance(data, self)

    def start(self, exec_id: str, tty: bool = False):
        """Start exec instance in detached mode (attached streams are not supported)"""
        self.http.post(
            f'/exec/{exec_id}/start',
            data={'Detach': True, 'Tty': tty},
            expect=(200, 204),
            errors={404: ExecNotFound, 409: ContainerPaused},
        )
