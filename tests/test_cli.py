"""Tests for the command line interface."""

import os

import pytest

from docker_client.cli import run_cli
from docker_client.client import DockerClient
from docker_client.request import Method
from docker_client.settings_manager import SettingsManager
from docker_client.transport import UnixSocketTransport


@pytest.fixture
def settings(tmp_path):
    return SettingsManager(str(tmp_path / 'settings.json'), use_environment=False)


@pytest.fixture
def run(monkeypatch, client, settings):
    """Run the CLI against the fake transport, return the exit code."""
    monkeypatch.setattr(DockerClient, 'from_settings', classmethod(lambda cls, s=None: client))

    def invoke(*argv):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(list(argv), settings=settings)
        return exc_info.value.code

    return invoke


def test_ping(run, transport, capsys):
    transport.queue(200, 'OK')
    assert run('ping') == 0
    assert capsys.readouterr().out.strip() == 'OK'


def test_ps_lists_containers(run, transport, capsys):
    transport.queue(200, [{'Id': 'a' * 64, 'Names': ['/web'], 'State': 'running', 'Image': 'nginx'}])
    assert run('ps', '--all') == 0

    out = capsys.readouterr().out
    assert 'web' in out
    assert 'Total: 1' in out
    assert transport.last.uri.params['all'] == 'true'


def test_kill_with_signal(run, transport):
    transport.queue(204)
    assert run('kill', '--name', 'web', '--signal', 'SIGHUP') == 0
    assert transport.last.method is Method.POST
    assert str(transport.last.uri) == '/containers/web/kill?signal=SIGHUP'


def test_rename(run, transport):
    transport.queue(204)
    assert run('rename', '--name', 'web', '--new-name', 'web-old') == 0
    assert transport.last.uri.params == {'name': 'web-old'}


def test_api_error_exits_nonzero(run, transport):
    transport.queue(404, {'message': 'No such container: web'})
    assert run('start', '--name', 'web') == 1


def test_name_required(run, transport):
    assert run('start') == 2
    assert transport.requests == []


def test_rename_requires_new_name(run):
    assert run('rename', '--name', 'web') == 2


def test_host_option_not_saved(run, transport, settings):
    transport.queue(200, {'Version': '24.0.7'})
    assert run('--host', 'tcp://10.1.1.1:2375', 'version') == 0
    assert settings.get('docker_host') == 'tcp://10.1.1.1:2375'
    assert not SettingsManager(settings.settings_file, use_environment=False).get('docker_host')


def test_unencodable_name_exits_nonzero(monkeypatch, settings, unix_socket_dir):
    client = DockerClient(transport=UnixSocketTransport(os.path.join(unix_socket_dir, 'none.sock'), timeout=1))
    monkeypatch.setattr(DockerClient, 'from_settings', classmethod(lambda cls, s=None: client))

    with pytest.raises(SystemExit) as exc_info:
        run_cli(['start', '--name', 'имя'], settings=settings)
    assert exc_info.value.code == 1
