"""Tests for the URI builder."""

import pytest

from docker_client.uri import URI, format_parameter


class TestURIBuilder:
    """Verify path and query parameter accumulation."""

    def test_path_only_has_no_question_mark(self):
        assert str(URI.with_path('/containers/json').build()) == '/containers/json'

    def test_parameters_render_as_query(self):
        uri = (URI.with_path('/containers/json')
               .parameter('all', 'true')
               .parameter('limit', '5')
               .build())
        rendered = str(uri)

        assert rendered.startswith('/containers/json?')
        pairs = rendered.split('?', 1)[1].split('&')
        assert sorted(pairs) == ['all=true', 'limit=5']

    def test_parameter_overwrites_same_key(self):
        uri = URI.with_path('/x').parameter('signal', 'SIGTERM').parameter('signal', 'SIGHUP').build()
        assert str(uri) == '/x?signal=SIGHUP'

    def test_none_value_is_skipped(self):
        uri = URI.with_path('/x').parameter('t', None).build()
        assert uri.params == {}

    def test_built_uri_is_independent_of_builder(self):
        builder = URI.with_path('/x').parameter('a', 1)
        uri = builder.build()
        builder.parameter('b', 2)
        assert uri.params == {'a': '1'}

    def test_values_are_percent_encoded(self):
        uri = URI.with_path('/containers/abc/rename').parameter('name', 'a b&c=d').build()
        assert str(uri) == '/containers/abc/rename?name=a%20b%26c%3Dd'

    def test_slash_kept_in_values(self):
        uri = URI.with_path('/images/create').parameter('fromImage', 'library/alpine').build()
        assert str(uri) == '/images/create?fromImage=library/alpine'

    def test_path_with_query_rejected(self):
        with pytest.raises(ValueError):
            URI('/containers/json?all=1')

    def test_equality(self):
        a = URI.with_path('/x').parameter('k', 'v').build()
        b = URI('/x', {'k': 'v'})
        assert a == b
        assert hash(a) == hash(b)


class TestFormatParameter:
    """Verify conversion of Python values to query strings."""

    def test_bool(self):
        assert format_parameter(True) == 'true'
        assert format_parameter(False) == 'false'

    def test_dict_becomes_compact_json(self):
        assert format_parameter({'label': ['a=b']}) == '{"label":["a=b"]}'

    def test_int(self):
        assert format_parameter(10) == '10'
