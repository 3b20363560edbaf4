"""Failure types raised by the transport, hooks and bootstrap."""
from typing import Optional

import requests


class ApiError(Exception):
    """Request failure carrying the HTTP status and the server's message"""

    def __init__(self, status: int, message: str):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message


class NetworkFailure(ApiError):
    def __init__(self, message: str):
        super().__init__(0, message)


class Unauthorized(ApiError):
    pass


class ServerRejection(ApiError):
    """Validation or other 4xx rejection"""


class NotFound(ServerRejection):
    pass


class ServerFault(ApiError):
    pass


class MalformedCredentialArtifact(ValueError):
    """Stored token could not be decoded; corrected locally, never shown"""


def _server_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return response.text or response.reason or ''


def error_for_response(response: requests.Response) -> Optional[ApiError]:
    """Translate a non-2xx response into its typed failure"""
    if response.ok:
        return None
    status = response.status_code
    message = _server_message(response)
    if status == 401:
        return Unauthorized(status, message)
    if status == 404:
        return NotFound(status, message)
    if 400 <= status < 500:
        return ServerRejection(status, message)
    return ServerFault(status, message)
