"""Tests for the networks resource."""

import json

import pytest

from docker_client.exceptions import NetworkExists, NetworkNotFound, NotFound
from docker_client.networks import IPAMConfig
from docker_client.request import Method

NETWORK = {
    'Id': '7d86d31b1478e7cca9ebed7e73aa0fdeec46c5ca29497431d3007d2d9e15ed99',
    'Name': 'backend',
    'Driver': 'bridge',
    'Scope': 'local',
    'Containers': None,
}


def test_list(client, transport):
    transport.queue(200, [NETWORK])
    networks = client.networks.list(filters={'name': ['backend']})

    assert networks[0].name == 'backend'
    assert networks[0].short_id == '7d86d31b1478'
    assert networks[0].containers == {}
    assert transport.last.uri.path == '/networks'


def test_get_with_scope(client, transport):
    transport.queue(200, NETWORK)
    client.networks.get('backend', verbose=True, scope='local')
    assert transport.last.uri.params == {'verbose': 'true', 'scope': 'local'}


def test_get_missing(client, transport):
    transport.queue(404)
    with pytest.raises(NetworkNotFound):
        client.networks.get('nope')


def test_create_body(client, transport):
    transport.queue(201, {'Id': NETWORK['Id'], 'Warning': ''}).queue(200, NETWORK)
    ipam = IPAMConfig().add_pool(subnet='172.28.0.0/16', gateway='172.28.0.1')

    network = client.networks.create('backend', internal=True, ipam=ipam, labels={'app': 'web'})

    create = transport.requests[0]
    assert create.method is Method.POST
    assert create.uri.path == '/networks/create'
    body = json.loads(create.body)
    assert body['Name'] == 'backend'
    assert body['Driver'] == 'bridge'
    assert body['Internal'] is True
    assert body['CheckDuplicate'] is True
    assert body['Labels'] == {'app': 'web'}
    assert body['IPAM'] == {
        'Driver': 'default',
        'Config': [{'Subnet': '172.28.0.0/16', 'Gateway': '172.28.0.1'}],
        'Options': {},
    }
    assert network.id == NETWORK['Id']


def test_create_duplicate(client, transport):
    transport.queue(409, {'message': 'network with name backend already exists'})
    with pytest.raises(NetworkExists):
        client.networks.create('backend')


def test_connect_and_disconnect(client, transport):
    transport.queue(200).queue(200)
    client.networks.connect('backend', 'web')
    assert transport.last.uri.path == '/networks/backend/connect'
    assert json.loads(transport.last.body) == {'Container': 'web'}

    client.networks.disconnect('backend', 'web', force=True)
    assert json.loads(transport.last.body) == {'Container': 'web', 'Force': True}


def test_connect_missing_container(client, transport):
    transport.queue(404, {'message': 'No such container: web'})
    with pytest.raises(NotFound):
        client.networks.connect('backend', 'web')


def test_remove(client, transport):
    transport.queue(204)
    client.networks.remove('backend')
    assert transport.last.method is Method.DELETE
    assert transport.last.uri.path == '/networks/backend'


def test_prune(client, transport):
    transport.queue(200, {'NetworksDeleted': ['backend']})
    assert client.networks.prune().deleted == ['backend']
