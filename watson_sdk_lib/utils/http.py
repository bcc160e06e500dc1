"""
Thin wrapper around ``requests`` that sends a prepared
:class:`~watson_sdk_lib.utils.request_builder.RequestSpec`.

The :class:`HttpRequester` class is the transport used by every service
façade.  It is deliberately dumb:

* it sends exactly one request per :meth:`HttpRequester.send` call – there is
  no retry adapter, no backoff and no caching,
* it returns the raw status, headers and body without interpreting them
  (that is the job of :mod:`watson_sdk_lib.utils.response_mapper`),
* every ``requests`` failure (timeout, refused connection, TLS problem ...)
  is converted into :class:`~watson_sdk_lib.exceptions.TransportError`.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from watson_sdk_lib.constants import DEFAULT_TIMEOUT
from watson_sdk_lib.exceptions import TransportError
from watson_sdk_lib.utils.request_builder import RequestSpec


@dataclass(frozen=True)
class RawResponse:
    """Undecoded result of one HTTP exchange."""

    status_code: int
    headers: Mapping[str, str]
    body: bytes


class HttpRequester:
    """
    Helper for sending :class:`RequestSpec` objects over HTTP.

    Parameters
    ----------
    timeout : float, default ``DEFAULT_TIMEOUT``
        Per‑request timeout in seconds.
    session : Optional[requests.Session]
        Session to reuse; a new one is created when omitted.  Sessions are
        shared between threads only for connection pooling, no request state
        is stored on them.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def send(self, spec: RequestSpec) -> RawResponse:
        """
        Perform the request described by *spec*.

        Parameters
        ----------
        spec : RequestSpec
            Fully built request description.

        Returns
        -------
        RawResponse
            Status code, headers and raw body of the response.

        Raises
        ------
        TransportError
            When the exchange did not complete.
        """
        self.logger.debug("%s %s | query=%s", spec.method, spec.url, spec.query)
        try:
            resp = self.session.request(
                spec.method,
                spec.url,
                params=list(spec.query) or None,
                headers=spec.all_headers(),
                data=spec.body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.logger.debug("%s %s failed: %s", spec.method, spec.url, exc)
            raise TransportError(
                f"{spec.method} {spec.url} failed: {exc}"
            ) from exc

        self.logger.debug("%s %s -> %s", spec.method, spec.url, resp.status_code)
        return RawResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content or b"",
        )

    def close(self) -> None:
        self.session.close()
