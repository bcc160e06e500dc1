"""
Construction of outbound HTTP request descriptions.

Everything in this module is pure: it turns caller arguments into an
immutable :class:`RequestSpec` without touching the network.  The only I/O
performed is reading the files a caller hands to :class:`MultipartForm`.

Encoding problems (an identifier that cannot be placed in a URL path, an
unreadable file, a body that cannot be serialised) are reported as
:class:`~watson_sdk_lib.exceptions.EncodingError` so a malformed request is
never produced.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from urllib3 import encode_multipart_formdata

from watson_sdk_lib.constants import CONTENT_JSON, CONTENT_TEXT
from watson_sdk_lib.exceptions import EncodingError

QueryItems = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]
FileSource = Union[str, os.PathLike, bytes, Any]


@dataclass(frozen=True)
class RequestSpec:
    """
    Fully specified description of one outbound HTTP request.

    Attributes
    ----------
    method : str
        HTTP verb (``"GET"``, ``"POST"``, ``"DELETE"`` ...).
    url : str
        Absolute URL without the query string.
    headers : Mapping[str, str]
        Read-only header mapping (default headers plus authentication).
    query : Tuple[Tuple[str, str], ...]
        Ordered query items; only parameters that were supplied are present.
    content_type : Optional[str]
        Value of the ``Content-Type`` header, ``None`` when there is no body.
    accept : Optional[str]
        Value of the ``Accept`` header.
    body : Optional[bytes]
        Encoded request body.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    query: Tuple[Tuple[str, str], ...] = ()
    content_type: Optional[str] = None
    accept: Optional[str] = CONTENT_JSON
    body: Optional[bytes] = None

    def all_headers(self) -> Dict[str, str]:
        """Headers to send, including ``Accept`` and ``Content-Type``."""
        headers = dict(self.headers)
        if self.accept:
            headers["Accept"] = self.accept
        if self.content_type:
            headers["Content-Type"] = self.content_type
        return headers


def query_value(value: Any) -> str:
    """Render a query parameter the way the services expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _query_items(query: QueryItems) -> Tuple[Tuple[str, str], ...]:
    if query is None:
        return ()
    items = query.items() if isinstance(query, Mapping) else query
    return tuple(
        (name, query_value(value)) for name, value in items if value is not None
    )


def encode_path_segment(value: str) -> str:
    """
    Percent-encode a caller supplied identifier for use as one path segment.

    Every character outside the RFC 3986 *unreserved* set is encoded, ``/``
    included, so an identifier can never change the shape of the path.  This
    differs from a generic path quote, which leaves ``/`` alone: ``"a/b"`` is
    sent as ``a%2Fb`` (one segment), not as ``a/b`` (two segments).

    Raises
    ------
    EncodingError
        If the value is not a non-empty string or cannot be encoded as UTF-8
        (e.g. it contains a lone surrogate).
    """
    if not isinstance(value, str):
        raise EncodingError(
            f"Path segment must be a string, got {type(value).__name__}"
        )
    if not value:
        raise EncodingError("Path segment must not be empty")
    try:
        return quote(value, safe="")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Path segment {value!r} cannot be encoded") from exc


def format_path(template: str, **segments: str) -> str:
    """
    Fill ``{name}`` placeholders of *template* with encoded path segments.

    >>> format_path("/v2/models/{model_id}", model_id="en es")
    '/v2/models/en%20es'
    """
    return template.format(
        **{name: encode_path_segment(value) for name, value in segments.items()}
    )


def build_request(
    method: str,
    base_url: str,
    path: str,
    query: QueryItems = None,
    headers: Optional[Mapping[str, str]] = None,
    content_type: Optional[str] = None,
    accept: Optional[str] = CONTENT_JSON,
    body: Optional[bytes] = None,
) -> RequestSpec:
    """
    Build an immutable :class:`RequestSpec`.

    Parameters
    ----------
    method : str
        HTTP verb.
    base_url : str
        Service URL; a trailing slash is stripped.
    path : str
        Operation path, already containing encoded segments
        (see :func:`format_path`).
    query : mapping or iterable of pairs, optional
        Query parameters; entries whose value is ``None`` are omitted.
    headers : Mapping[str, str], optional
        Headers to attach (default headers and authentication).
    content_type : str, optional
        Body content type.
    accept : str, optional
        Expected response content type.
    body : bytes, optional
        Encoded body.
    """
    url = f"{base_url.rstrip('/')}{path if path.startswith('/') else '/' + path}"
    return RequestSpec(
        method=method.upper(),
        url=url,
        headers=MappingProxyType(dict(headers or {})),
        query=_query_items(query),
        content_type=content_type if body is not None else None,
        accept=accept,
        body=body,
    )


# ----------------------------------------------------------------------
# Body encoders
# ----------------------------------------------------------------------
def json_body(payload: Any) -> Tuple[bytes, str]:
    """
    Serialise a model (or a plain dict) to a JSON body.

    Models are dumped with their wire keys and without absent optional
    fields.
    """
    try:
        if hasattr(payload, "to_json"):
            return payload.to_json(), CONTENT_JSON
        return json.dumps(payload, ensure_ascii=False).encode("utf-8"), CONTENT_JSON
    except Exception as exc:
        raise EncodingError(f"Request body could not be serialised: {exc}") from exc


def text_body(text: str) -> Tuple[bytes, str]:
    """Encode plain text as a UTF-8 body."""
    try:
        return text.encode("utf-8"), CONTENT_TEXT
    except UnicodeEncodeError as exc:
        raise EncodingError("Text could not be encoded as UTF-8") from exc


class MultipartForm:
    """
    Accumulates the parts of a ``multipart/form-data`` body.

    File parts are read eagerly when added, so an unreadable file is reported
    before any request is built.  Encoding itself is delegated to
    :func:`urllib3.encode_multipart_formdata`.
    """

    def __init__(self):
        self._fields: List[Tuple[str, Any]] = []

    def __len__(self) -> int:
        return len(self._fields)

    def add_text(self, name: str, value: str) -> "MultipartForm":
        self._fields.append((name, value))
        return self

    def add_file(
        self,
        name: str,
        source: FileSource,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> "MultipartForm":
        """
        Add a file part.

        Parameters
        ----------
        name : str
            Form field name.
        source : str | os.PathLike | bytes | binary file object
            Path of the file to read, raw content, or an open binary file.
        filename : str, optional
            File name reported in the part; derived from *source* when omitted.
        content_type : str, optional
            Part content type, ``application/octet-stream`` when omitted.
        """
        data, default_name = self._read(name, source)
        part = (
            filename or default_name,
            data,
            content_type or "application/octet-stream",
        )
        self._fields.append((name, part))
        return self

    @staticmethod
    def _read(name: str, source: FileSource) -> Tuple[bytes, str]:
        if isinstance(source, (bytes, bytearray)):
            return bytes(source), name
        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            try:
                return path.read_bytes(), path.name
            except OSError as exc:
                raise EncodingError(f"Unable to read file {path}: {exc}") from exc
        if hasattr(source, "read"):
            try:
                data = source.read()
            except OSError as exc:
                raise EncodingError(f"Unable to read file part {name}: {exc}") from exc
            if isinstance(data, str):
                raise EncodingError(f"File part {name} must be opened in binary mode")
            return data, os.path.basename(getattr(source, "name", "") or name)
        raise EncodingError(
            f"Unsupported file source for part {name}: {type(source).__name__}"
        )

    def encode(self) -> Tuple[bytes, str]:
        """Return ``(body, content_type)`` including the generated boundary."""
        try:
            return encode_multipart_formdata(self._fields)
        except (UnicodeEncodeError, TypeError) as exc:
            raise EncodingError(f"Multipart body could not be encoded: {exc}") from exc
