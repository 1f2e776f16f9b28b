"""
Request descriptors and signing results.
"""

import collections.abc
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from .constants import HEADER_AUTHORIZATION
from .exceptions import InvalidRequestError


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Description of one request that has not been signed yet.

    Built with a path and refined with the with_* methods, each of which
    returns a new descriptor. A descriptor can be signed any number of
    times; every signing produces its own timestamp and nonce.

    Example:
        request = (RequestDescriptor.new("/papi/v1/groups")
                   .with_headers({"X-Custom": "1"})
                   .with_max_body(131072))

    Descriptors are read-only: headers are exposed as a mapping proxy
    over a private copy. They are not hashable.

    Attributes:
        path: URI path plus query string, starting with "/"
        headers: Headers to include in the signature, in signing order
        body: Request payload (str is encoded as UTF-8)
        max_body: Truncate the payload to this many bytes before signing
    """
    path: str
    headers: Optional[Mapping[str, str]] = None
    body: Optional[bytes] = field(default=None, repr=False)
    max_body: Optional[int] = None

    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.path, str) or not self.path.startswith('/'):
            raise InvalidRequestError(f"path must start with '/': {self.path!r}")

        if self.headers is not None:
            if not isinstance(self.headers, collections.abc.Mapping):
                raise InvalidRequestError(
                    f"headers must be a mapping, not {type(self.headers).__name__}"
                )
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

        body = self.body
        if isinstance(body, str):
            body = body.encode('utf-8')
        elif isinstance(body, (bytearray, memoryview)):
            body = bytes(body)
        elif body is not None and not isinstance(body, bytes):
            raise InvalidRequestError(f"body must be bytes or str, not {type(body).__name__}")
        object.__setattr__(self, 'body', body)

        if self.max_body is not None:
            if isinstance(self.max_body, bool) or not isinstance(self.max_body, int):
                raise InvalidRequestError("max_body must be an integer")
            if self.max_body < 0:
                raise InvalidRequestError("max_body cannot be negative")

    @classmethod
    def new(cls, path: str) -> "RequestDescriptor":
        """Create a descriptor with no headers, body or max body."""
        return cls(path)

    def with_headers(self, headers: Mapping[str, str]) -> "RequestDescriptor":
        """Return a copy signing the given headers, in iteration order."""
        return replace(self, headers=headers)

    def with_body(self, body: Union[bytes, str]) -> "RequestDescriptor":
        """Return a copy carrying the given body (str is encoded as UTF-8)."""
        return replace(self, body=body)

    def with_max_body(self, max_body: int) -> "RequestDescriptor":
        """Return a copy that truncates bodies longer than max_body bytes."""
        return replace(self, max_body=max_body)


@dataclass(frozen=True)
class SignedResult:
    """
    Output of one signing call.

    Attributes:
        auth_header: Complete Authorization header value
        body: Bytes to send as the request body, already truncated to match
            the signature; None when the request carries no body
        timestamp: Timestamp embedded in the header
        nonce: Nonce embedded in the header
    """
    auth_header: str
    body: Optional[bytes] = field(default=None, repr=False)
    timestamp: str = ''
    nonce: str = ''

    @property
    def headers(self) -> Dict[str, str]:
        """Headers to merge into the outgoing request."""
        return {HEADER_AUTHORIZATION: self.auth_header}
