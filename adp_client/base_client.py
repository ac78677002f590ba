from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
import requests
from .config import ClientConfig
from .exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    parsed_body: Any
    raw_body: bytes
    host: str


class BaseClient:
    """HTTP transport shared by the token manager and the API client.

    The client certificate is attached to the session, so the token call and
    every resource call present it.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        if config.pem:
            self.session.cert = config.pem
        self.timeout = config.timeout
        self.logger = config.logger or logger

    def url_for(self, path: str) -> str:
        return (self.config.base_url or '').rstrip('/') + '/' + path.lstrip('/')

    def _send(self, method: str, url: str, *, headers: Dict[str, str], data: Any | None = None) -> RawResponse:
        try:
            resp = self.session.request(method.upper(), url, headers=headers, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Network error: {e}") from e
        return RawResponse(
            status_code=resp.status_code,
            parsed_body=_parse_body(resp),
            raw_body=resp.content or b'',
            host=self.config.host,
        )


def _parse_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None
