from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional
import requests
from .base_client import BaseClient
from .classifier import STRUCTURED_RULES, ErrorClassifier, Failure
from .config import ClientConfig
from .token_manager import Token, TokenManager

USER_AGENT = 'AdpClient'


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: Any


class AdpClient(BaseClient):
    """ADP API client authenticated with client credentials and a client
    certificate (PEM with the private key appended).

    Settings come from ``config`` (or ``ClientConfig.from_env()`` when omitted);
    keyword overrides replace individual fields::

        client = AdpClient(base_url='https://api.adp.com', client_id='...',
                           client_secret='...', pem='/etc/adp/client.pem')
        event = client.get('events/time/v1/data-collection-entries.process/123')
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None, **overrides):
        config = config or ClientConfig.from_env()
        if overrides:
            config = config.replace(**overrides)
        super().__init__(config, session=session)
        self.classifier = ErrorClassifier()
        self.delete_classifier = ErrorClassifier(STRUCTURED_RULES)
        self.token_manager = TokenManager(self, self.classifier)

    @property
    def token(self) -> Token:
        return self.token_manager.get_token()

    def get(self, path: str) -> Any:
        url = self.url_for(path)
        headers = self._base_headers()
        self._log_request('GET', url, headers)
        return self.classifier.unwrap(self._send('GET', url, headers=headers))

    def post(self, path: str, json_body: Any) -> Any:
        url = self.url_for(path)
        headers = self._base_headers()
        headers['Content-Type'] = 'application/json'
        payload = json.dumps(json_body)
        self._log_request('POST', url, headers)
        self.logger.debug("-- JSON %s", payload)
        return self.classifier.unwrap(self._send('POST', url, headers=headers, data=payload))

    def delete(self, path: str) -> ApiResponse:
        """Delete a resource and return its status and body.

        Structured failures (500, 400, 401, 404) still raise; any other
        status comes back in the envelope.
        """
        url = self.url_for(path)
        headers = self._base_headers()
        self._log_request('DELETE', url, headers)
        response = self._send('DELETE', url, headers=headers)
        outcome = self.delete_classifier.classify(response)
        if isinstance(outcome, Failure):
            raise outcome.to_exception()
        return ApiResponse(response.status_code, outcome.body)

    get_resource = get
    post_resource = post

    def _base_headers(self) -> Dict[str, str]:
        return {
            'Accept': 'application/json',
            'Authorization': f"Bearer {self.token.access_token}",
            'Connection': 'keep-alive',
            'Host': self.config.host,
            'User-Agent': USER_AGENT,
        }

    def _log_request(self, method: str, url: str, headers: Dict[str, str]) -> None:
        self.logger.debug("%s request Url: %s", method, url)
        redacted = dict(headers, Authorization='Bearer ***')
        self.logger.debug("-- Headers: %s", redacted)
