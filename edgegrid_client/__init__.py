"""
EdgeGrid Client Library

A Python library that generates Akamai EdgeGrid (EG1-HMAC-SHA256)
Authorization headers for requests sent to Akamai {OPEN} APIs.

Example usage:
    from edgegrid_client import Credentials, RequestDescriptor, sign

    credentials = Credentials.from_env()
    request = RequestDescriptor.new("/diagnostic-tools/v2/ghost-locations/available")
    signed = sign(credentials, request, "GET")
    headers = {"Authorization": signed.auth_header}
"""

from .auth import EdgeGridAuth
from .credentials import Credentials
from .request import RequestDescriptor, SignedResult
from .signer import EdgeGridSigner, sign
from .exceptions import (
    EdgeGridError,
    InvalidCredentialsError,
    InvalidRequestError,
    InvalidMethodError,
    BodyOnGetError,
    ConfigurationError
)
from .constants import (
    HEADER_AUTHORIZATION,
    AUTH_SCHEME,
    SUPPORTED_METHODS,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "Credentials",
    "RequestDescriptor",
    "SignedResult",
    "EdgeGridSigner",
    "EdgeGridAuth",
    "sign",
    "EdgeGridError",
    "InvalidCredentialsError",
    "InvalidRequestError",
    "InvalidMethodError",
    "BodyOnGetError",
    "ConfigurationError",
    "HEADER_AUTHORIZATION",
    "AUTH_SCHEME",
    "SUPPORTED_METHODS",
    "DEFAULT_CONFIG"
]
