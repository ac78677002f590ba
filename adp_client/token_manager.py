from __future__ import annotations
import threading
from dataclasses import dataclass
from typing import Optional
from .base_client import BaseClient
from .classifier import ErrorClassifier

TOKEN_PATH = 'auth/oauth/v2/token'


@dataclass(frozen=True)
class Token:
    access_token: str = ''
    token_type: str = ''
    expires_in: int = 0
    scope: str = ''


class TokenManager:
    """Client-credentials token, fetched on first use and cached for the
    lifetime of the manager.

    The token is never refreshed, even after ``expires_in`` elapses; clients
    are expected to be short lived. Concurrent first calls are serialised so
    only one token request is issued.
    """

    def __init__(self, transport: BaseClient, classifier: Optional[ErrorClassifier] = None):
        self.transport = transport
        self.classifier = classifier or ErrorClassifier()
        self._token: Optional[Token] = None
        self._lock = threading.Lock()

    @property
    def cached(self) -> Optional[Token]:
        return self._token

    def get_token(self) -> Token:
        if self._token is not None:
            return self._token
        with self._lock:
            if self._token is None:
                self._token = self._fetch()
        return self._token

    def _fetch(self) -> Token:
        config = self.transport.config
        config.validate()
        url = self.transport.url_for(TOKEN_PATH)
        self.transport.logger.debug("Request token from %s", url)
        response = self.transport._send(
            'POST',
            url,
            headers={'Accept': 'application/json', 'Host': config.host},
            data={
                'client_id': config.client_id,
                'client_secret': config.client_secret,
                'grant_type': 'client_credentials',
            },
        )
        body = self.classifier.unwrap(response)
        fields = body if isinstance(body, dict) else {}
        return Token(
            access_token=fields.get('access_token') or '',
            token_type=fields.get('token_type') or '',
            expires_in=_as_int(fields.get('expires_in')),
            scope=fields.get('scope') or '',
        )


def _as_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
