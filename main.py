#!/usr/bin/env python3
"""
docker-socket-client
Application entry point
"""


def main():
    """Main function"""
    from docker_client.cli import run_cli
    run_cli()


if __name__ == "__main__":
    main()
