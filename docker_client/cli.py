"""
CLI - command line interface
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .client import DockerClient
from .exceptions import DockerException
from .settings_manager import SettingsManager

logger = logging.getLogger(__name__)


class DockerClientCLI:
    """Docker client CLI interface"""

    def __init__(self, client: DockerClient):
        self.client = client

    def ping(self) -> bool:
        if self.client.ping():
            print("OK")
            return True
        logger.error("Docker daemon did not answer ping")
        return False

    def version(self) -> bool:
        version = self.client.version()
        print(f"Version:     {version.get('Version', 'Unknown')}")
        print(f"API version: {version.get('ApiVersion', 'Unknown')}")
        print(f"OS/Arch:     {version.get('Os', '?')}/{version.get('Arch', '?')}")
        return True

    def list_containers(self, all_containers: bool = False) -> bool:
        """List containers"""
        containers = self.client.containers.list(all=all_containers)

        if not containers:
            logger.info("No containers found")
            return True

        print(f"{'NAME':<30} {'STATUS':<15} {'IMAGE':<40} {'ID':<15}")
        print("-" * 100)

        for c in containers:
            print(f"{c.name:<30} {c.status:<15} {c.image:<40} {c.short_id:<15}")

        print(f"\nTotal: {len(containers)}")
        return True

    def list_images(self) -> bool:
        images = self.client.images.list()

        print(f"{'TAG':<50} {'ID':<15} {'SIZE (MB)':>10}")
        print("-" * 77)

        for img in images:
            tag = img.tags[0] if img.tags else '<none>'
            print(f"{tag:<50} {img.short_id:<15} {img.size / 1e6:>10.1f}")

        print(f"\nTotal: {len(images)}")
        return True

    def list_volumes(self) -> bool:
        volumes = self.client.volumes.list()

        print(f"{'NAME':<66} {'DRIVER':<10}")
        print("-" * 77)

        for volume in volumes:
            print(f"{volume.name:<66} {volume.driver:<10}")

        for warning in self.client.volumes.warnings:
            logger.warning(warning)

        print(f"\nTotal: {len(volumes)}")
        return True

    def list_networks(self) -> bool:
        networks = self.client.networks.list()

        print(f"{'NAME':<30} {'DRIVER':<15} {'SCOPE':<10} {'ID':<15}")
        print("-" * 73)

        for network in networks:
            print(f"{network.name:<30} {network.driver:<15} {network.scope:<10} {network.short_id:<15}")

        print(f"\nTotal: {len(networks)}")
        return True

    def inspect_container(self, name: str) -> bool:
        container = self.client.containers.get(name)
        print(json.dumps(container.attrs, indent=2))
        return True

    def start_container(self, name: str) -> bool:
        logger.info(f"Starting container {name}...")
        self.client.containers.start(name)
        logger.info(f"✓ Container {name} started")
        return True

    def stop_container(self, name: str) -> bool:
        logger.info(f"Stopping container {name}...")
        self.client.containers.stop(name)
        logger.info(f"✓ Container {name} stopped")
        return True

    def kill_container(self, name: str, signal: Optional[str] = None) -> bool:
        self.client.containers.kill(name, signal=signal)
        logger.info(f"✓ Container {name} killed")
        return True

    def remove_container(self, name: str, force: bool = False) -> bool:
        logger.info(f"Removing container {name}...")
        self.client.containers.remove(name, force=force)
        logger.info(f"✓ Container {name} removed")
        return True

    def rename_container(self, name: str, new_name: str) -> bool:
        self.client.containers.rename(name, new_name)
        logger.info(f"✓ Container {name} renamed to {new_name}")
        return True

    def create_volume(self, name: Optional[str] = None) -> bool:
        volume = self.client.volumes.create(name=name)
        logger.info(f"✓ Volume {volume.name} created")
        return True

    def remove_volume(self, name: str, force: bool = False) -> bool:
        self.client.volumes.remove(name, force=force)
        logger.info(f"✓ Volume {name} removed")
        return True


ACTIONS = [
    'ping', 'version', 'ps', 'images', 'volumes', 'networks',
    'inspect', 'start', 'stop', 'kill', 'remove', 'rename',
    'create-volume', 'remove-volume',
]

NAME_REQUIRED = {'inspect', 'start', 'stop', 'kill', 'remove', 'rename', 'remove-volume'}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='docker-socket-client',
        description='Docker Engine API client over the daemon socket',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Usage examples:
  %(prog)s ps --all                                # List all containers
  %(prog)s start --name web
  %(prog)s kill --name web --signal SIGTERM
  %(prog)s rename --name web --new-name web-old
  %(prog)s --host tcp://127.0.0.1:2375 version
"""
    )

    parser.add_argument('action', choices=ACTIONS, help='Action')

    parser.add_argument('--host', help='Docker host URL or socket path')
    parser.add_argument('--name', help='Container or volume name')
    parser.add_argument('--new-name', help='New container name (rename)')
    parser.add_argument('--signal', help='Signal to send (kill)')
    parser.add_argument('--force', action='store_true', help='Force action')
    parser.add_argument('--all', action='store_true', help='Show all containers')
    parser.add_argument('--debug', action='store_true', help='Log every HTTP exchange')

    return parser


def dispatch(cli: DockerClientCLI, args) -> bool:
    if args.action == 'ping':
        return cli.ping()
    if args.action == 'version':
        return cli.version()
    if args.action == 'ps':
        return cli.list_containers(all_containers=args.all)
    if args.action == 'images':
        return cli.list_images()
    if args.action == 'volumes':
        return cli.list_volumes()
    if args.action == 'networks':
        return cli.list_networks()
    if args.action == 'inspect':
        return cli.inspect_container(args.name)
    if args.action == 'start':
        return cli.start_container(args.name)
    if args.action == 'stop':
        return cli.stop_container(args.name)
    if args.action == 'kill':
        return cli.kill_container(args.name, signal=args.signal)
    if args.action == 'remove':
        return cli.remove_container(args.name, force=args.force)
    if args.action == 'rename':
        return cli.rename_container(args.name, args.new_name)
    if args.action == 'create-volume':
        return cli.create_volume(args.name)
    if args.action == 'remove-volume':
        return cli.remove_volume(args.name, force=args.force)
    raise ValueError(f"Unknown action: {args.action}")


def run_cli(argv: Optional[List[str]] = None, settings: Optional[SettingsManager] = None):
    """Run CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.action in NAME_REQUIRED and not args.name:
        parser.error(f"{args.action} requires --name")
    if args.action == 'rename' and not args.new_name:
        parser.error("rename requires --new-name")

    settings = settings or SettingsManager()
    if args.host:
        settings.set('docker_host', args.host, save=False)

    level = 'DEBUG' if args.debug else str(settings.get('log_level', 'INFO')).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format='%(message)s')

    try:
        cli = DockerClientCLI(DockerClient.from_settings(settings))
        ok = dispatch(cli, args)
    except KeyboardInterrupt:
        logger.info("\n\nInterrupted by user")
        sys.exit(0)
    except DockerException as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    run_cli()
