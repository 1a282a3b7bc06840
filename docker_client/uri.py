"""
URI builder for Docker Engine API paths
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import quote


def format_parameter(value: Any) -> str:
    """Convert a query parameter value to its wire form"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(',', ':'))
    return str(value)


class URI:
    """Immutable API path plus query parameters"""

    def __init__(self, path: str = '/', params: Optional[Dict[str, str]] = None):
        if '?' in path:
            raise ValueError(f"URI path must not contain a query string: {path}")
        self._path = path
        self._params = dict(params or {})

    @classmethod
    def builder(cls) -> 'URIBuilder':
        return URIBuilder()

    @classmethod
    def with_path(cls, path: str) -> 'URIBuilder':
        """Start a builder for the given path"""
        return URIBuilder().path(path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def params(self) -> Dict[str, str]:
        return dict(self._params)

    def query(self) -> str:
        """
        Render the query string without the leading '?'

        Values are percent-encoded, keys are emitted as given.
        """
        return '&'.join(f"{key}={quote(value)}" for key, value in self._params.items())

    def __str__(self):
        query = self.query()
        if not query:
            return self._path
        return f"{self._path}?{query}"

    def __repr__(self):
        return f"<URI: {self}>"

    def __eq__(self, other):
        if not isinstance(other, URI):
            return NotImplemented
        return self._path == other._path and self._params == other._params

    def __hash__(self):
        return hash((self._path, tuple(sorted(self._params.items()))))


class URIBuilder:
    """Accumulates a path and query parameters"""

    def __init__(self):
        self._path = '/'
        self._params: Dict[str, str] = {}

    def path(self, path: str) -> 'URIBuilder':
        self._path = path
        return self

    def parameter(self, key: str, value: Any) -> 'URIBuilder':
        """
        Set a query parameter, overwriting an existing one with the same key

        Args:
            key: Parameter name
            value: Parameter value; None leaves the parameter unset

        Returns:
            The builder itself
        """
        if value is not None:
            self._params[key] = format_parameter(value)
        return self

    def parameters(self, params: Optional[Dict[str, Any]]) -> 'URIBuilder':
        """Set several parameters at once"""
        for key, value in (params or {}).items():
            self.parameter(key, value)
        return self

    def build(self) -> URI:
        return URI(self._path, self._params)
