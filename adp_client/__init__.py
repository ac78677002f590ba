"""Client for the ADP REST API (OAuth2 client credentials + client certificate).

Usage example:
    from adp_client import AdpClient
    client = AdpClient()  # settings from ADP_* environment variables
    entry = client.get('events/time/v1/data-collection-entries.process/123')
"""
from .client import AdpClient, ApiResponse  # noqa: F401
from .config import ClientConfig  # noqa: F401
from .token_manager import Token  # noqa: F401
from .exceptions import (  # noqa: F401
    ApiRequestError, BadRequest, ConfigurationError, InvalidRequest, ResourceNotFound,
    ServerError, TransportError, Unauthorized, UnknownError,
)
