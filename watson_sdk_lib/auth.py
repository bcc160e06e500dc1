"""
Credential providers used to authenticate requests.

A service façade owns exactly one :class:`Credentials` instance and asks it
for the authentication headers that are attached to every outgoing
:class:`~watson_sdk_lib.utils.request_builder.RequestSpec`.  Only HTTP Basic
authentication is supported at the moment.
"""

import abc
import base64
from dataclasses import dataclass, field
from typing import Dict


class Credentials(abc.ABC):
    """Abstract authentication strategy."""

    @abc.abstractmethod
    def auth_headers(self) -> Dict[str, str]:
        """Return the headers that authenticate a single request."""


@dataclass(frozen=True)
class BasicAuthentication(Credentials):
    """
    Username / password pair sent as ``Authorization: Basic ...``.

    The header value is derived once, at construction time, and reused for
    every request.
    """

    username: str
    password: str = field(repr=False)
    _header: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        token = base64.b64encode(
            f"{self.username}:{self.password}".encode("utf-8")
        ).decode("ascii")
        object.__setattr__(self, "_header", f"Basic {token}")

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": self._header}
