"""
Mapping of raw HTTP responses to typed outcomes.

:func:`map_response` is the single place where a status code and a body are
turned into either a decoded model (:class:`Success`) or a structured error
(:class:`Failure`).  It never retries and never raises; raising is left to
:meth:`Success.unwrap` / :meth:`Failure.unwrap` so callers can choose between
exceptions and explicit pattern matching on the outcome.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar, Union

from watson_sdk_lib.exceptions import (
    AuthenticationError,
    DecodingError,
    RateLimitError,
    ServerError,
    ValidationError,
    WatsonSDKError,
)

T = TypeVar("T")

# (code, message) extracted from an error document, or None
ErrorParser = Callable[[Any], Optional[Tuple[Optional[int | str], str]]]

_default_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding the decoded value (``None`` for void calls)."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome holding the error that describes it."""

    error: WatsonSDKError

    @property
    def ok(self) -> bool:
        return False

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.error, "status_code", None)

    @property
    def message(self) -> Optional[str]:
        return getattr(self.error, "message", None)

    def unwrap(self):
        raise self.error


ResponseOutcome = Union[Success[T], Failure]


def default_error_parser(document: Any) -> Optional[Tuple[Optional[int | str], str]]:
    """
    Extract ``(code, message)`` from a service error document.

    Understands the shapes returned by the platform services:

    * ``{"error_code": 404, "error_message": "..."}``
    * ``{"code": 400, "error": "..."}``
    * ``{"code": 400, "message": "..."}``
    * ``{"error": {"code": "...", "description": "..."}}``
    """
    if not isinstance(document, dict):
        return None
    nested = document.get("error")
    if isinstance(nested, dict):
        return default_error_parser(nested)

    code = document.get("error_code", document.get("code"))
    for key in ("error_message", "error", "message", "description"):
        message = document.get(key)
        if isinstance(message, str):
            return code, message
    return None


def _error_class(status_code: int) -> Type[ServerError]:
    if status_code in (401, 403):
        return AuthenticationError
    if status_code == 429:
        return RateLimitError
    if status_code == 400:
        return ValidationError
    return ServerError


def server_error(
    status_code: int,
    body: Optional[bytes],
    domain: str = "",
    error_parser: ErrorParser = default_error_parser,
) -> ServerError:
    """
    Build the :class:`ServerError` describing a non-2xx response.

    When the body is a parseable error document the error carries the
    service code and message; otherwise only the HTTP status is known.
    """
    body = body or b""
    error_cls = _error_class(status_code)
    if not body:
        return error_cls(status_code, domain=domain)

    try:
        parsed = error_parser(json.loads(body))
    except ValueError:
        parsed = None
    if parsed is None:
        return error_cls(status_code, domain=domain, body=body)

    code, message = parsed
    return error_cls(status_code, domain=domain, code=code, message=message, body=body)


def map_response(
    status_code: int,
    body: Optional[bytes],
    decoder: Optional[Type[Any]] = None,
    domain: str = "",
    error_parser: ErrorParser = default_error_parser,
    logger: Optional[logging.Logger] = None,
) -> ResponseOutcome:
    """
    Turn a raw status/body pair into a :class:`Success` or :class:`Failure`.

    Parameters
    ----------
    status_code : int
        HTTP status of the response.
    body : bytes, optional
        Raw response body.
    decoder : model class, optional
        Class exposing ``from_json(bytes)``; ``None`` marks a void
        (delete-style) operation whose body is never decoded.
    domain : str
        Tag of the calling service, copied into server errors.
    error_parser : ErrorParser
        Extracts ``(code, message)`` from a parsed error document.
    logger : logging.Logger, optional
        Logger used for diagnostics.
    """
    logger = logger or _default_logger

    if not 200 <= status_code < 300:
        error = server_error(status_code, body, domain, error_parser)
        logger.debug("[%s] %s", domain, error)
        return Failure(error)

    if decoder is None:
        return Success(None)

    try:
        return Success(decoder.from_json(body or b""))
    except DecodingError as exc:
        logger.error(
            "[%s] could not decode %s: %s | body=%r",
            domain,
            decoder.__name__,
            exc,
            exc.body,
        )
        return Failure(exc)
