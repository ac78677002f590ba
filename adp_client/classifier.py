"""Ordered classification of raw ADP responses.

Rules are evaluated top to bottom and the first match wins. The order is
significant: a 400 carrying ``error == "invalid_request"`` must be seen before
the generic bad-request rule, and the catch-all comes last.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union
from .base_client import RawResponse
from . import exceptions

MISSING_MESSAGE = 'No userMessage messageTxt found'
BAD_REQUEST_MESSAGE = 'Looks like a Bad Request'


class ErrorKind(enum.Enum):
    SERVER_ERROR = 'server_error'
    INVALID_REQUEST = 'invalid_request'
    RESOURCE_NOT_FOUND = 'resource_not_found'
    UNAUTHORIZED = 'unauthorized'
    BAD_REQUEST = 'bad_request'
    UNKNOWN_ERROR = 'unknown_error'


EXCEPTION_TYPES: Dict[ErrorKind, type] = {
    ErrorKind.SERVER_ERROR: exceptions.ServerError,
    ErrorKind.INVALID_REQUEST: exceptions.InvalidRequest,
    ErrorKind.RESOURCE_NOT_FOUND: exceptions.ResourceNotFound,
    ErrorKind.UNAUTHORIZED: exceptions.Unauthorized,
    ErrorKind.BAD_REQUEST: exceptions.BadRequest,
    ErrorKind.UNKNOWN_ERROR: exceptions.UnknownError,
}


@dataclass(frozen=True)
class Success:
    body: Any


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    data: Optional[Any] = None

    def to_exception(self) -> exceptions.ApiRequestError:
        return EXCEPTION_TYPES[self.kind](self.message, self.data)


ClassifiedOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class Rule:
    kind: ErrorKind
    matches: Callable[[RawResponse], bool]
    message: Callable[[RawResponse], str]
    with_data: bool = False


def _fields(response: RawResponse) -> Dict[str, Any]:
    body = response.parsed_body
    return body if isinstance(body, dict) else {}


def _dig(node: Any, *path: Union[str, int]) -> Any:
    for segment in path:
        if isinstance(segment, int):
            if not isinstance(node, list) or len(node) <= segment:
                return None
        elif not isinstance(node, dict):
            return None
        node = node[segment] if isinstance(segment, int) else node.get(segment)
    return node


def _user_message(response: RawResponse, *path: Union[str, int]) -> str:
    text = _dig(_fields(response), *path, 'userMessage', 'messageTxt')
    return text if isinstance(text, str) and text else MISSING_MESSAGE


def _oauth_message(response: RawResponse) -> str:
    body = _fields(response)
    error, description = body.get('error'), body.get('error_description')
    return f"{'' if error is None else error}: {'' if description is None else description}"


def _unknown_message(response: RawResponse) -> str:
    return f"Code {response.status_code}: {response.raw_body.decode('utf-8', errors='replace')}"


STRUCTURED_RULES: Tuple[Rule, ...] = (
    Rule(
        ErrorKind.SERVER_ERROR,
        lambda r: r.status_code == 500,
        lambda r: _user_message(r, 'confirmMessage', 'resourceMessages', 0, 'processMessages', 0),
        with_data=True,
    ),
    Rule(
        ErrorKind.INVALID_REQUEST,
        lambda r: r.status_code == 400 and _fields(r).get('error') == 'invalid_request',
        _oauth_message,
    ),
    Rule(
        ErrorKind.RESOURCE_NOT_FOUND,
        lambda r: r.status_code == 404,
        lambda r: _user_message(r, 'confirmMessage', 'processMessages', 0),
    ),
    Rule(
        ErrorKind.UNAUTHORIZED,
        lambda r: r.status_code == 401,
        _oauth_message,
    ),
    Rule(
        ErrorKind.BAD_REQUEST,
        lambda r: r.status_code == 400 and _fields(r).get('error') is None,
        lambda r: BAD_REQUEST_MESSAGE,
        with_data=True,
    ),
)

DEFAULT_RULES: Tuple[Rule, ...] = STRUCTURED_RULES + (
    Rule(
        ErrorKind.UNKNOWN_ERROR,
        lambda r: not 200 <= r.status_code < 300,
        _unknown_message,
    ),
)


class ErrorClassifier:
    def __init__(self, rules: Sequence[Rule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def classify(self, response: RawResponse) -> ClassifiedOutcome:
        for rule in self.rules:
            if rule.matches(response):
                data = response.parsed_body if rule.with_data else None
                return Failure(rule.kind, rule.message(response), data)
        return Success(response.parsed_body)

    def unwrap(self, response: RawResponse) -> Any:
        """Return the body of a successful response or raise the mapped error."""
        outcome = self.classify(response)
        if isinstance(outcome, Failure):
            raise outcome.to_exception()
        return outcome.body


def classify(response: RawResponse) -> ClassifiedOutcome:
    return ErrorClassifier().classify(response)
