"""
Constants for the EdgeGrid client library.
Values follow the Akamai EdgeGrid EG1-HMAC-SHA256 client authentication scheme.
"""

# HTTP header carrying the signed value
HEADER_AUTHORIZATION = "Authorization"

# Signing algorithm identifier, first token of the header value
AUTH_SCHEME = "EG1-HMAC-SHA256"

# Scheme placeholder in the data to sign; EdgeGrid APIs are HTTPS only
SIGNED_SCHEME = "https"

# UTC, second precision, e.g. 20240101T00:00:00+0000
TIMESTAMP_FORMAT = "%Y%m%dT%H:%M:%S+0000"

SUPPORTED_METHODS = frozenset(["GET", "POST", "PUT", "DELETE"])

# Methods whose requests carry a payload
BODY_METHODS = frozenset(["POST", "PUT"])

# Default configuration values
DEFAULT_CONFIG = {
    'max_body': None,       # no truncation unless a descriptor asks for it
    'strict_body': True,    # reject a body on GET/DELETE instead of dropping it
}

# Environment variables read by Credentials.from_env()
ENV_HOST = "AKAMAI_API_HOST"
ENV_CLIENT_TOKEN = "CLIENT_TOKEN"
ENV_CLIENT_SECRET = "CLIENT_SECRET"
ENV_ACCESS_TOKEN = "ACCESS_TOKEN"
