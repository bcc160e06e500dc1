"""
Base class shared by all service façades.

A façade exposes one method per remote operation.  Every method follows the
same recipe implemented here:

1. encode its arguments into a :class:`RequestSpec` (:meth:`build`),
2. send it through the transport (:class:`HttpRequester`),
3. map the raw response to a :class:`Success` or :class:`Failure`
   (:meth:`execute`),
4. return the decoded model, or raise the failure (:meth:`_call`).

The façade holds only read-only configuration – credentials, service URL,
default headers and the API version.  ``service_url`` and
``default_headers`` are plain attributes the caller may change, but doing so
while other threads have calls in flight must be serialised by the caller.
"""

import abc
import logging
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError as PydanticValidationError

from watson_sdk_lib.auth import BasicAuthentication, Credentials
from watson_sdk_lib.constants import CONTENT_JSON, DEFAULT_TIMEOUT
from watson_sdk_lib.exceptions import EncodingError, TransportError
from watson_sdk_lib.utils.http import HttpRequester
from watson_sdk_lib.utils.request_builder import (
    QueryItems,
    RequestSpec,
    build_request,
)
from watson_sdk_lib.utils.response_mapper import (
    ErrorParser,
    Failure,
    ResponseOutcome,
    default_error_parser,
    map_response,
)


class BaseWatsonService(abc.ABC):
    """
    Abstract base class for service façades.

    Sub‑classes must set ``default_service_url`` (the base URL used when the
    caller does not pass one) and ``domain`` (the tag attached to server
    errors).

    Parameters
    ----------
    username : str
        Username used for HTTP Basic authentication.
    password : str
        Password used for HTTP Basic authentication.
    version : Optional[str]
        API version date (``YYYY-MM-DD``) sent as the ``version`` query item
        on every call when set.
    service_url : Optional[str]
        Base URL of the service, ``default_service_url`` when omitted.
    default_headers : Optional[Mapping[str, str]]
        Headers attached to every request (e.g. ``X-Watson-Learning-Opt-Out``).
    timeout : float
        Per‑request timeout in seconds.
    http : Optional[HttpRequester]
        Transport to use; a new one is created when omitted.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    credentials : Optional[Credentials]
        Alternative to ``username``/``password``.

    Raises
    ------
    EncodingError
        If neither ``credentials`` nor a ``username`` is given.
    """

    # Base URL of the service
    default_service_url: str = ""

    # Tag attached to errors produced by this service
    domain: str = ""

    # Extracts (code, message) from the service error documents
    error_parser: ErrorParser = staticmethod(default_error_parser)

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        version: Optional[str] = None,
        service_url: Optional[str] = None,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        http: Optional[HttpRequester] = None,
        logger: Optional[logging.Logger] = None,
        credentials: Optional[Credentials] = None,
    ) -> None:
        if credentials is None:
            if not username:
                raise EncodingError(
                    f"{type(self).__name__} needs a username or credentials"
                )
            credentials = BasicAuthentication(username, password or "")
        self._credentials = credentials
        self.version = version
        self.service_url = (service_url or self.default_service_url).rstrip("/")
        self.default_headers: Dict[str, str] = dict(default_headers or {})
        self.logger = logger or logging.getLogger(__name__)
        self.http = http or HttpRequester(timeout=timeout, logger=self.logger)

    # ------------------------------------------------------------------ #
    def build(
        self,
        method: str,
        path: str,
        query: QueryItems = None,
        headers: Optional[Mapping[str, str]] = None,
        content_type: Optional[str] = None,
        body: Optional[bytes] = None,
        accept: Optional[str] = CONTENT_JSON,
    ) -> RequestSpec:
        """
        Build the :class:`RequestSpec` of one call.

        The ``version`` query item (when configured) precedes the
        operation's own query items; authentication headers override any
        default or per-call header of the same name.
        """
        items = []
        if self.version is not None:
            items.append(("version", self.version))
        if query:
            items.extend(query.items() if isinstance(query, Mapping) else query)

        all_headers = dict(self.default_headers)
        all_headers.update(headers or {})
        all_headers.update(self._credentials.auth_headers())

        return build_request(
            method,
            self.service_url,
            path,
            query=items,
            headers=all_headers,
            content_type=content_type,
            accept=accept,
            body=body,
        )

    def execute(
        self, spec: RequestSpec, decoder: Optional[Type[Any]] = None
    ) -> ResponseOutcome:
        """
        Send *spec* and map the response.

        Never raises for transport, server or decoding problems; they are
        returned as :class:`Failure`.

        Parameters
        ----------
        spec : RequestSpec
            Request to send.
        decoder : model class, optional
            Expected response model; ``None`` for void operations.
        """
        try:
            raw = self.http.send(spec)
        except TransportError as exc:
            self.logger.error("[%s] %s", self.domain, exc)
            return Failure(exc)
        return map_response(
            raw.status_code,
            raw.body,
            decoder=decoder,
            domain=self.domain,
            error_parser=self.error_parser,
            logger=self.logger,
        )

    @staticmethod
    def _payload(model_cls: Type[Any], **fields):
        """Instantiate a request model, reporting bad arguments as EncodingError."""
        try:
            return model_cls(**fields)
        except PydanticValidationError as exc:
            raise EncodingError(
                f"Invalid {model_cls.__name__} arguments: {exc}"
            ) from exc

    def _call(
        self, method: str, path: str, decoder: Optional[Type[Any]] = None, **kwargs
    ):
        return self.execute(self.build(method, path, **kwargs), decoder).unwrap()
