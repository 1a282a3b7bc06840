"""
Docker API Exceptions
"""

import json
from typing import Dict, Iterable, Optional, Type


class DockerException(Exception):
    """Base Docker exception"""
    pass


class TransportError(DockerException):
    """A single request/response exchange failed below the HTTP layer"""
    pass


class DockerConnectionError(TransportError):
    """Socket could not be opened or connected"""
    pass


class SendError(TransportError):
    """Request bytes could not be fully written"""
    pass


class FramingError(TransportError):
    """Response could not be split into status, headers and body"""
    pass


class TruncatedBody(TransportError):
    """Peer closed the connection before Content-Length bytes arrived"""

    def __init__(self, message, expected: int = 0, received: int = 0):
        super().__init__(message)
        self.expected = expected
        self.received = received


class ReadTimeout(TransportError):
    """Read deadline expired while waiting for the response"""
    pass


class APIError(DockerException):
    """Docker API error"""

    def __init__(self, message, response=None, status_code=None):
        super().__init__(message)
        self.response = response
        self.status_code = status_code


class BadParameters(APIError):
    """Bad parameters (400)"""
    pass


class NotFound(APIError):
    """Resource not found (404)"""
    pass


class ContainerNotFound(NotFound):
    """Container not found"""
    pass


class ImageNotFound(NotFound):
    """Image not found"""
    pass


class NetworkNotFound(NotFound):
    """Network not found"""
    pass


class VolumeNotFound(NotFound):
    """Volume not found"""
    pass


class ExecNotFound(NotFound):
    """Exec instance not found"""
    pass


class Conflict(APIError):
    """Request conflicts with the current state (409)"""
    pass


class ContainerExists(Conflict):
    """Container name already in use"""
    pass


class NotRunning(Conflict):
    """Container is not running"""
    pass


class ContainerPaused(Conflict):
    """Container is paused"""
    pass


class NetworkExists(Conflict):
    """Network name already in use"""
    pass


class Busy(Conflict):
    """Resource is in use by a container"""
    pass


class ServerError(APIError):
    """Daemon internal error (500)"""
    pass


class UnknownStatus(APIError):
    """Status code not documented for the endpoint"""
    pass


DEFAULT_ERRORS: Dict[int, Type[APIError]] = {
    400: BadParameters,
    404: NotFound,
    409: Conflict,
    500: ServerError,
}


def error_message(response) -> str:
    """Extract the daemon's error message from a response body"""
    body = response.body
    try:
        data = json.loads(body)
    except ValueError:
        return body.strip()
    if isinstance(data, dict) and 'message' in data:
        return str(data['message'])
    return body.strip()


def check_status(response, expect: Iterable[int] = (200,),
                 errors: Optional[Dict[int, Type[APIError]]] = None):
    """
    Map a response status to a result or an exception

    Args:
        response: Decoded Response
        expect: Status codes that mean success for the endpoint
        errors: Endpoint-specific status -> exception class overrides

    Returns:
        The response itself when the status is expected

    Raises:
        APIError: Subclass chosen by status code
    """
    if response.status in expect:
        return response

    table = dict(DEFAULT_ERRORS)
    if errors:
        table.update(errors)

    error_class = table.get(response.status, UnknownStatus)
    message = error_message(response)
    if error_class is UnknownStatus:
        message = f"Unexpected status {response.status}: {message}"

    raise error_class(message, response=response, status_code=response.status)
