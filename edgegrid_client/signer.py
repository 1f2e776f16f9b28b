"""
EdgeGrid request signing.

This module builds the EG1-HMAC-SHA256 Authorization header used by
Akamai {OPEN} APIs. Signing is a pure computation over the credentials,
the request descriptor, the method, a timestamp and a nonce; nothing is
cached between calls.

Signing steps:
    1. preamble   = "EG1-HMAC-SHA256 client_token=..;access_token=..;timestamp=..;nonce=..;"
    2. body hash  = base64(SHA256(body truncated to max_body)), or "" without a body
    3. data       = METHOD \\t https \\t host \\t path \\t headers \\t body hash \\t preamble
    4. key        = base64(HMAC-SHA256(client_secret, timestamp))
    5. signature  = base64(HMAC-SHA256(key, data))
    6. header     = preamble + "signature=" + signature + ";"
"""

import base64
import datetime
import hashlib
import hmac
import logging
import uuid
from typing import Mapping, Optional, Tuple, Union

from .constants import (
    AUTH_SCHEME,
    SIGNED_SCHEME,
    TIMESTAMP_FORMAT,
    SUPPORTED_METHODS,
    BODY_METHODS,
    DEFAULT_CONFIG
)
from .credentials import Credentials
from .exceptions import (
    InvalidMethodError,
    BodyOnGetError,
    ConfigurationError
)
from .request import RequestDescriptor, SignedResult

logger = logging.getLogger(__name__)


def make_timestamp(now: Optional[datetime.datetime] = None) -> str:
    """Format the current (or given) time in UTC as EdgeGrid expects."""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(datetime.timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def make_nonce() -> str:
    """Generate a random UUID4 nonce."""
    return str(uuid.uuid4())


def base64_sha256(data: bytes) -> str:
    """SHA-256 digest of data, base64-encoded."""
    return base64.b64encode(hashlib.sha256(data).digest()).decode('ascii')


def base64_hmac_sha256(data: str, key: str) -> str:
    """HMAC-SHA256 of data under key, base64-encoded."""
    mac = hmac.new(
        key.encode('utf-8'),
        data.encode('utf-8'),
        hashlib.sha256
    )
    return base64.b64encode(mac.digest()).decode('ascii')


def make_auth_preamble(credentials: Credentials, timestamp: str, nonce: str) -> str:
    """Build the unsigned part of the Authorization header."""
    return (
        f"{AUTH_SCHEME} "
        f"client_token={credentials.client_token};"
        f"access_token={credentials.access_token};"
        f"timestamp={timestamp};"
        f"nonce={nonce};"
    )


def truncate_body(body: Optional[bytes], max_body: Optional[int]) -> Optional[bytes]:
    """
    Apply the body truncation policy.

    Bodies longer than max_body are cut to exactly max_body bytes. Shorter
    bodies are returned unchanged, never padded. Without max_body the body
    is returned whole.
    """
    if body is None or max_body is None or len(body) <= max_body:
        return body
    logger.warning("Truncating request body from %d to %d bytes", len(body), max_body)
    return body[:max_body]


def canonicalize_headers(headers: Optional[Mapping[str, str]]) -> str:
    """
    Render signed headers as tab-separated "name:value" pairs.

    Headers are used in the order given and exactly as given; choosing and
    normalizing the headers an endpoint requires is up to the caller.
    """
    if not headers:
        return ''
    return '\t'.join(f"{name}:{value}" for name, value in headers.items())


def make_data_to_sign(credentials: Credentials, method: str, path: str,
                      headers: Optional[Mapping[str, str]], body_hash: str,
                      preamble: str) -> str:
    """Assemble the tab-delimited string covered by the signature."""
    return '\t'.join([
        method.upper(),
        SIGNED_SCHEME,
        credentials.host,
        path,
        canonicalize_headers(headers),
        body_hash,
        preamble
    ])


def make_signing_key(client_secret: str, timestamp: str) -> str:
    """Derive the per-timestamp signing key from the client secret."""
    return base64_hmac_sha256(timestamp, client_secret)


def _check_method(method: str) -> str:
    if not isinstance(method, str):
        raise InvalidMethodError(f"HTTP method must be a string, not {type(method).__name__}")
    verb = method.upper()
    if verb not in SUPPORTED_METHODS:
        raise InvalidMethodError(
            f"Unsupported HTTP method {method!r}; expected one of {', '.join(sorted(SUPPORTED_METHODS))}"
        )
    return verb


def _prepare_body(descriptor: RequestDescriptor, method: str, max_body: Optional[int],
                  strict_body: bool) -> Tuple[Optional[bytes], str]:
    """Return the body to send and its hash for the data to sign."""
    body = descriptor.body
    if not body:
        return None, ''

    if method not in BODY_METHODS:
        if strict_body:
            raise BodyOnGetError(f"{method} requests cannot carry a body")
        logger.warning("Ignoring %d byte body on %s %s", len(body), method, descriptor.path)
        return None, ''

    body = truncate_body(body, max_body)
    if not body:
        return body, ''
    return body, base64_sha256(body)


def sign(credentials: Credentials, descriptor: RequestDescriptor, method: str,
         timestamp: Optional[str] = None, nonce: Optional[str] = None,
         strict_body: bool = True) -> SignedResult:
    """
    Sign a request and build its Authorization header.

    Args:
        credentials: API client credentials
        descriptor: Request to sign
        method: HTTP method (GET, POST, PUT or DELETE, any case)
        timestamp: Fixed timestamp; a fresh one is generated when omitted
        nonce: Fixed nonce; a fresh one is generated when omitted
        strict_body: Raise BodyOnGetError for a body on GET/DELETE instead
            of dropping it

    Returns:
        SignedResult with the header value and the body to send

    Raises:
        InvalidMethodError: If method is not supported
        BodyOnGetError: If a body is given for a method without one
    """
    verb = _check_method(method)
    body, body_hash = _prepare_body(descriptor, verb, descriptor.max_body, strict_body)

    if timestamp is None:
        timestamp = make_timestamp()
    if nonce is None:
        nonce = make_nonce()

    logger.debug("Signing %s %s (timestamp=%s, nonce=%s)", verb, descriptor.path, timestamp, nonce)

    preamble = make_auth_preamble(credentials, timestamp, nonce)
    data_to_sign = make_data_to_sign(
        credentials, verb, descriptor.path, descriptor.headers, body_hash, preamble
    )
    signing_key = make_signing_key(credentials.client_secret, timestamp)
    signature = base64_hmac_sha256(data_to_sign, signing_key)

    return SignedResult(
        auth_header=f"{preamble}signature={signature};",
        body=body,
        timestamp=timestamp,
        nonce=nonce
    )


class EdgeGridSigner:
    """
    Reusable signer bound to one set of credentials.

    Provides get/post/put/delete shortcuts over sign(). Holds no state
    besides its credentials and configuration, so one instance can be
    shared between threads.
    """

    def __init__(self, credentials: Credentials, **config):
        """
        Initialize signer.

        Args:
            credentials: API client credentials
            **config: Configuration options (max_body, strict_body)
        """
        self.credentials = credentials

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

    def _validate_config(self):
        """Validate signer configuration."""
        if not isinstance(self.credentials, Credentials):
            raise ConfigurationError("credentials must be a Credentials instance")

        unknown = set(self.config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

        max_body = self.config['max_body']
        if max_body is not None:
            if isinstance(max_body, bool) or not isinstance(max_body, int) or max_body < 0:
                raise ConfigurationError("max_body must be a non-negative integer or None")

        if not isinstance(self.config['strict_body'], bool):
            raise ConfigurationError("strict_body must be a boolean")

    def _descriptor(self, request: Union[RequestDescriptor, str], headers=None,
                    body=None, max_body=None) -> RequestDescriptor:
        if isinstance(request, str):
            request = RequestDescriptor.new(request)
        if headers is not None:
            request = request.with_headers(headers)
        if body is not None:
            request = request.with_body(body)
        if max_body is not None:
            request = request.with_max_body(max_body)
        elif request.max_body is None and self.config['max_body'] is not None:
            request = request.with_max_body(self.config['max_body'])
        return request

    def sign(self, request: Union[RequestDescriptor, str], method: str, **kwargs) -> SignedResult:
        """
        Sign a request.

        Args:
            request: RequestDescriptor, or a path to build one from
            method: HTTP method
            **kwargs: headers, body, max_body applied on top of the descriptor

        Returns:
            SignedResult
        """
        descriptor = self._descriptor(request, **kwargs)
        return sign(self.credentials, descriptor, method, strict_body=self.config['strict_body'])

    def get(self, request: Union[RequestDescriptor, str], headers=None) -> SignedResult:
        """Sign a GET request."""
        return self.sign(request, 'GET', headers=headers)

    def post(self, request: Union[RequestDescriptor, str], body=None, headers=None,
             max_body=None) -> SignedResult:
        """Sign a POST request."""
        return self.sign(request, 'POST', headers=headers, body=body, max_body=max_body)

    def put(self, request: Union[RequestDescriptor, str], body=None, headers=None,
            max_body=None) -> SignedResult:
        """Sign a PUT request."""
        return self.sign(request, 'PUT', headers=headers, body=body, max_body=max_body)

    def delete(self, request: Union[RequestDescriptor, str], headers=None) -> SignedResult:
        """Sign a DELETE request."""
        return self.sign(request, 'DELETE', headers=headers)
