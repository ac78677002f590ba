import json
import time
import uuid
import pytest
import requests

from adp_client import AdpClient, ClientConfig

BASE_URL = 'https://iat-api.adp.com'
TOKEN_URL = f'{BASE_URL}/auth/oauth/v2/token'


def make_response(status, body=None, raw=None):
    resp = requests.Response()
    resp.status_code = status
    if raw is None:
        raw = b'' if body is None else json.dumps(body).encode('utf-8')
    resp._content = raw
    resp.headers['Content-Type'] = 'application/json'
    resp.encoding = 'utf-8'
    return resp


class FakeSession:
    """Stands in for requests.Session: canned responses keyed by (method, url)."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.delays = {}
        self.cert = None

    def add(self, method, url, response, delay=0):
        self.routes[(method.upper(), url)] = response
        self.delays[(method.upper(), url)] = delay

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append({'method': method, 'url': url, 'headers': headers, 'data': data, 'timeout': timeout})
        outcome = self.routes.get((method, url))
        if outcome is None:
            raise AssertionError(f'Unexpected request {method} {url}')
        if self.delays.get((method, url)):
            time.sleep(self.delays[(method, url)])
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def calls_to(self, method, url):
        return [c for c in self.calls if c['method'] == method and c['url'] == url]


@pytest.fixture
def access_token():
    return str(uuid.uuid4())


@pytest.fixture
def config():
    return ClientConfig(
        base_url=BASE_URL,
        client_id=str(uuid.uuid4()),
        client_secret=str(uuid.uuid4()),
        pem='/etc/adp/adp_api_iat.pem',
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def valid_token(session, access_token):
    session.add('POST', TOKEN_URL, make_response(200, {
        'access_token': access_token,
        'token_type': 'Bearer',
        'expires_in': 3600,
        'scope': 'api',
    }))


@pytest.fixture
def client(config, session):
    return AdpClient(config, session=session)
