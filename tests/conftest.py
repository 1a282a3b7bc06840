"""Shared fakes for the client tests.

Nothing here talks to a real Docker daemon: streams replay scripted chunks
and the fake transport returns queued responses while recording requests.
"""

import json
import os
import shutil
import socket
import tempfile
import threading

import pytest

from docker_client.client import DockerClient
from docker_client.response import Response
from docker_client.transport import Transport


class ScriptedStream:
    """recv() returns the scripted chunks one per call, then b''."""

    def __init__(self, *chunks):
        self.chunks = list(chunks)
        self.calls = 0

    def recv(self, size):
        self.calls += 1
        if not self.chunks:
            return b''
        chunk = self.chunks.pop(0)
        if isinstance(chunk, BaseException):
            raise chunk
        return chunk


class FakeTransport(Transport):
    """Returns queued responses and keeps every request it was given."""

    def __init__(self, *responses):
        super().__init__()
        self.responses = list(responses)
        self.requests = []

    def queue(self, status, body=None, reason='OK'):
        if body is None:
            content = b''
        elif isinstance(body, (dict, list)):
            content = json.dumps(body).encode('utf-8')
        else:
            content = body.encode('utf-8')
        self.responses.append(Response(status, reason, {}, content, len(content)))
        return self

    def send(self, request):
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return DockerClient(transport=transport)


def read_request(conn):
    """Read one request (headers plus Content-Length body) from a socket."""
    data = b''
    while b'\r\n\r\n' not in data:
        chunk = conn.recv(1024)
        if not chunk:
            return data
        data += chunk
    head, _, body = data.partition(b'\r\n\r\n')
    length = 0
    for line in head.split(b'\r\n')[1:]:
        key, _, value = line.partition(b':')
        if key.strip().lower() == b'content-length':
            length = int(value.strip())
    while len(body) < length:
        body += conn.recv(1024)
    return head + b'\r\n\r\n' + body


class OneShotServer:
    """Accepts one connection, captures the request, writes a canned reply."""

    def __init__(self, listener, reply):
        self.listener = listener
        self.reply = reply
        self.received = b''
        self.thread = threading.Thread(target=self._serve, daemon=True)
        self.thread.start()

    def _serve(self):
        conn, _ = self.listener.accept()
        try:
            self.received = read_request(conn)
            conn.sendall(self.reply)
        finally:
            conn.close()
            self.listener.close()

    def join(self):
        self.thread.join(timeout=5)


@pytest.fixture
def unix_socket_dir():
    # AF_UNIX paths are length limited, keep it short
    path = tempfile.mkdtemp(prefix='dsc-')
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def unix_server(unix_socket_dir):
    """Factory: start a one-shot server on a temporary Unix socket."""

    def start(reply):
        socket_path = os.path.join(unix_socket_dir, 'docker.sock')
        listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        listener.bind(socket_path)
        listener.listen(1)
        return socket_path, OneShotServer(listener, reply)

    return start


@pytest.fixture
def tcp_server():
    """Factory: start a one-shot server on an ephemeral loopback port."""

    def start(reply):
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        listener.bind(('127.0.0.1', 0))
        listener.listen(1)
        return listener.getsockname()[1], OneShotServer(listener, reply)

    return start
