"""Tests for the volumes resource."""

import json

import pytest

from docker_client.exceptions import BadParameters, Busy, ServerError, VolumeNotFound
from docker_client.request import Method

VOLUME = {
    'Name': 'data',
    'Driver': 'local',
    'Mountpoint': '/var/lib/docker/volumes/data/_data',
    'Labels': None,
    'Scope': 'local',
    'Options': None,
}


class TestVolumes:

    def test_create(self, client, transport):
        transport.queue(201, VOLUME)
        volume = client.volumes.create('data', labels={'env': 'test'})

        assert volume.name == 'data'
        assert volume.id == 'data'
        assert volume.labels == {}
        assert volume.options == {}
        assert transport.last.method is Method.POST
        assert transport.last.uri.path == '/volumes/create'
        assert json.loads(transport.last.body) == {'Name': 'data', 'Labels': {'env': 'test'}}

    def test_create_anonymous_sends_empty_object(self, client, transport):
        transport.queue(201, VOLUME)
        client.volumes.create()
        assert transport.last.body == '{}'

    def test_create_bad_driver(self, client, transport):
        transport.queue(500, {'message': 'plugin not found'})
        with pytest.raises(ServerError, match="plugin not found"):
            client.volumes.create('data', driver='nope')

    def test_get(self, client, transport):
        transport.queue(200, VOLUME)
        assert client.volumes.get('data').mountpoint == VOLUME['Mountpoint']
        assert transport.last.uri.path == '/volumes/data'

    def test_get_missing(self, client, transport):
        transport.queue(404, {'message': 'get data: no such volume'})
        with pytest.raises(VolumeNotFound):
            client.volumes.get('data')

    def test_list(self, client, transport):
        transport.queue(200, {'Volumes': [VOLUME], 'Warnings': ['partial']})
        volumes = client.volumes.list(filters={'dangling': ['true']})

        assert [v.name for v in volumes] == ['data']
        assert client.volumes.warnings == ['partial']
        assert json.loads(transport.last.uri.params['filters']) == {'dangling': ['true']}

    def test_list_null_volumes(self, client, transport):
        transport.queue(200, {'Volumes': None, 'Warnings': None})
        assert client.volumes.list() == []
        assert client.volumes.warnings == []

    def test_remove(self, client, transport):
        transport.queue(204)
        client.volumes.remove('data', force=True)
        assert transport.last.method is Method.DELETE
        assert str(transport.last.uri) == '/volumes/data?force=true'

    def test_remove_in_use(self, client, transport):
        transport.queue(409, {'message': 'volume is in use'})
        with pytest.raises(Busy):
            client.volumes.remove('data')

    def test_remove_missing(self, client, transport):
        transport.queue(404)
        with pytest.raises(VolumeNotFound):
            client.volumes.remove('data')

    def test_bad_parameters(self, client, transport):
        transport.queue(400, {'message': 'bad filter'})
        with pytest.raises(BadParameters):
            client.volumes.list(filters={'bogus': ['x']})

    def test_prune(self, client, transport):
        transport.queue(200, {'VolumesDeleted': ['data'], 'SpaceReclaimed': 1024})
        report = client.volumes.prune()
        assert report.deleted == ['data']
        assert report.space_reclaimed == 1024
