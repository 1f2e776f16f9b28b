"""
EdgeGrid API client credentials.

A Credentials object holds the four values issued for one API client in
Akamai Control Center. It is immutable and may be shared freely between
threads and signing calls.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import urlsplit

from .constants import (
    ENV_HOST,
    ENV_CLIENT_TOKEN,
    ENV_CLIENT_SECRET,
    ENV_ACCESS_TOKEN
)
from .exceptions import InvalidCredentialsError


@dataclass(frozen=True)
class Credentials:
    """
    Credentials for one EdgeGrid API identity.

    Attributes:
        host: API hostname, e.g. "akab-xxxx.luna.akamaiapis.net" (no scheme or path)
        client_token: Client token
        client_secret: Client secret, used only as HMAC key material
        access_token: Access token
    """
    host: str
    client_token: str
    client_secret: str = field(repr=False)
    access_token: str = field(repr=False)

    def __post_init__(self):
        """Validate credential fields."""
        for name in ('host', 'client_token', 'client_secret', 'access_token'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidCredentialsError(
                    f"{name} must be a string, not {type(value).__name__}"
                )
            if not value.strip():
                raise InvalidCredentialsError(f"{name} cannot be empty")

        # Parse as a network location so "host/path" and "host?q" are caught too
        parts = urlsplit(f"//{self.host}")
        if '://' in self.host or parts.path or parts.query or parts.fragment:
            raise InvalidCredentialsError(
                f"host must be a bare hostname without scheme or path: {self.host!r}"
            )

    @classmethod
    def new(cls, host: str, client_token: str, client_secret: str,
            access_token: str) -> "Credentials":
        """Create credentials; same as calling the class."""
        return cls(host, client_token, client_secret, access_token)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Credentials":
        """
        Load credentials from environment variables.

        Reads AKAMAI_API_HOST, CLIENT_TOKEN, CLIENT_SECRET and ACCESS_TOKEN.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            InvalidCredentialsError: If a variable is missing or empty
        """
        if environ is None:
            environ = os.environ

        values = []
        for var in (ENV_HOST, ENV_CLIENT_TOKEN, ENV_CLIENT_SECRET, ENV_ACCESS_TOKEN):
            value = environ.get(var)
            if not value:
                raise InvalidCredentialsError(f"Missing environment variable {var}")
            values.append(value)

        return cls(*values)
