"""
requests integration.

EdgeGridAuth signs each outgoing request prepared by requests:

    session = requests.Session()
    session.auth = EdgeGridAuth(Credentials.from_env())
    session.get(f"https://{host}/diagnostic-tools/v2/ghost-locations/available")
"""

import logging
from typing import Iterable, Optional

import requests

from .constants import HEADER_AUTHORIZATION
from .credentials import Credentials
from .exceptions import InvalidRequestError
from .request import RequestDescriptor
from .signer import sign

logger = logging.getLogger(__name__)


class EdgeGridAuth(requests.auth.AuthBase):
    """
    requests authentication handler for EdgeGrid.

    Args:
        credentials: API client credentials
        headers_to_sign: Names of request headers the endpoint requires in
            the signature, in signing order
        max_body: Truncate bodies to this many bytes before signing and sending

    Only in-memory bodies (bytes or str) can be signed. Streamed bodies such
    as open files or generators raise InvalidRequestError; read them into
    memory first.
    """

    def __init__(self, credentials: Credentials, headers_to_sign: Iterable[str] = (),
                 max_body: Optional[int] = None):
        self.credentials = credentials
        self.headers_to_sign = list(headers_to_sign)
        self.max_body = max_body

    def _signed_headers(self, r: requests.PreparedRequest):
        headers = {}
        for name in self.headers_to_sign:
            if name in r.headers:
                headers[name] = r.headers[name]
        return headers

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        descriptor = RequestDescriptor.new(r.path_url)

        headers = self._signed_headers(r)
        if headers:
            descriptor = descriptor.with_headers(headers)

        body = r.body
        if body is not None and not isinstance(body, (bytes, str)):
            raise InvalidRequestError(
                f"Cannot sign a streamed request body ({type(body).__name__}); "
                "pass bytes or str instead"
            )
        if body:
            descriptor = descriptor.with_body(body)
        if self.max_body is not None:
            descriptor = descriptor.with_max_body(self.max_body)

        result = sign(self.credentials, descriptor, r.method)

        # The signature covers the truncated body, so that is what must be sent
        if result.body is not None and descriptor.body is not None \
                and len(result.body) != len(descriptor.body):
            r.body = result.body
            r.headers['Content-Length'] = str(len(result.body))

        r.headers[HEADER_AUTHORIZATION] = result.auth_header
        logger.debug("Signed %s %s", r.method, r.path_url)
        return r
