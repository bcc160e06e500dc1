from __future__ import annotations

import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from watson_sdk_lib.utils.http import HttpRequester


def _make_response(
    status_code: int = 200,
    payload: Any = None,
    body: Optional[bytes] = None,
    headers: Optional[Dict[str, str]] = None,
) -> MagicMock:
    """Build a fake ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = headers or {"Content-Type": "application/json"}
    if body is None:
        body = json.dumps(payload).encode("utf-8") if payload is not None else b""
    resp.content = body
    return resp


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def session() -> MagicMock:
    """A ``requests.Session`` stand-in answering ``200 {}`` by default."""
    fake = MagicMock(spec=requests.Session)
    fake.request.return_value = _make_response(200, {})
    return fake


@pytest.fixture
def http(session) -> HttpRequester:
    return HttpRequester(timeout=5, session=session)


@pytest.fixture
def last_request(session):
    """Return the arguments of the last request sent through ``session``."""

    def _last() -> Dict[str, Any]:
        args, kwargs = session.request.call_args
        sent = {"method": args[0], "url": args[1]}
        sent.update(kwargs)
        return sent

    return _last
