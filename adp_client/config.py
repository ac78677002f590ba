from __future__ import annotations
import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse
from .exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one client instance.

    ``pem`` is the path of a PEM file holding the client certificate with the
    private key appended.
    """
    base_url: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    pem: Optional[str] = None
    logger: Optional[logging.Logger] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, required: bool = False) -> 'ClientConfig':
        """Default configuration sourced from ADP_* environment variables."""
        return cls(
            base_url=env('ADP_API_HOST', required),
            client_id=env('ADP_CLIENT_ID', required),
            client_secret=env('ADP_CLIENT_SECRET', required),
            pem=env('ADP_SSL_CERT_PATH', required),
            timeout=_timeout_from_env(),
        )

    def replace(self, **overrides) -> 'ClientConfig':
        return dataclasses.replace(self, **overrides)

    @property
    def host(self) -> str:
        return urlparse(self.base_url or '').hostname or ''

    def validate(self) -> None:
        missing = [name for name in ('base_url', 'client_id', 'client_secret', 'pem') if not getattr(self, name)]
        if missing:
            raise ConfigurationError(f"Missing required client settings: {', '.join(missing)}")


def env(name: str, required: bool = True) -> Optional[str]:
    val = os.getenv(name)
    if required and (val is None or val.strip() == ''):
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return val


def _timeout_from_env() -> float:
    raw = os.getenv('ADP_TIMEOUT')
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT
