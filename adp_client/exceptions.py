from __future__ import annotations
from typing import Any, Optional


class ApiRequestError(Exception):
    """Base error for every failed ADP API call.

    ``data`` holds the parsed response body when the failure kind carries it
    (server errors and bad requests), otherwise ``None``.
    """

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class ServerError(ApiRequestError):
    """Upstream failure (500)."""

class InvalidRequest(ApiRequestError):
    """Structured invalid request (400 with error == 'invalid_request')."""

class ResourceNotFound(ApiRequestError):
    """Requested resource does not exist (404)."""

class Unauthorized(ApiRequestError):
    """Credentials or certificate rejected (401)."""

class BadRequest(ApiRequestError):
    """Unstructured bad request (400 without an error field)."""

class UnknownError(ApiRequestError):
    """Any other non-2xx response."""

class TransportError(ApiRequestError):
    """The request never produced an HTTP response (connection, TLS, timeout)."""

class ConfigurationError(ApiRequestError):
    """Required client settings are missing."""
