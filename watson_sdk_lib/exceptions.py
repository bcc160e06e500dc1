"""
Custom exception hierarchy for the Watson SDK library.

All public exceptions inherit from :class:`WatsonSDKError`, allowing callers
to catch a single base class for any SDK failure while still being able to
differentiate the four failure kinds of a single call:

* :class:`EncodingError` – the caller input could not be turned into a request,
* :class:`TransportError` – the HTTP exchange did not complete,
* :class:`ServerError` – the service answered with a non‑2xx status,
* :class:`DecodingError` – a 2xx body did not match the expected model.

None of these errors is retried by the library.
"""

from typing import Optional


class WatsonSDKError(Exception):
    """Base exception for all Watson‑SDK‑specific errors."""

    pass


class EncodingError(WatsonSDKError):
    """Raised when a path segment, file part or body cannot be encoded."""

    pass


class TransportError(WatsonSDKError):
    """Raised when the request did not complete (timeout, DNS, TLS, refused)."""

    pass


class DecodingError(WatsonSDKError):
    """
    Raised when a successful response does not match the expected model.

    Attributes
    ----------
    body : bytes
        The raw response body, kept for diagnostics.
    """

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body


class ServerError(WatsonSDKError):
    """
    Raised when the service returns an HTTP status outside ``[200, 300)``.

    Attributes
    ----------
    status_code : int
        HTTP status of the response.
    domain : str
        Tag of the service that produced the error.
    code : Optional[int | str]
        Machine code reported by the service, when the body was parseable.
    message : Optional[str]
        Human readable message reported by the service, when parseable.
    body : bytes
        Raw response body (may be empty).
    """

    def __init__(
        self,
        status_code: int,
        domain: str = "",
        code: Optional[int | str] = None,
        message: Optional[str] = None,
        body: bytes = b"",
    ):
        self.status_code = status_code
        self.domain = domain
        self.code = code
        self.message = message
        self.body = body
        text = f"HTTP {status_code}"
        if message:
            text += f": {message}"
        super().__init__(text)


class AuthenticationError(ServerError):
    """Raised when the server returns HTTP 401/403 (invalid or missing credentials)."""

    pass


class RateLimitError(ServerError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass


class ValidationError(ServerError):
    """Raised when the server returns HTTP 400 – malformed request payload."""

    pass

