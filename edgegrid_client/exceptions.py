"""
Custom exceptions for EdgeGrid client library.
"""


class EdgeGridError(Exception):
    """Base exception for EdgeGrid client errors."""
    pass


class InvalidCredentialsError(EdgeGridError):
    """Raised when a credential field is missing, empty or malformed."""
    pass


class InvalidRequestError(EdgeGridError):
    """Raised when a request descriptor is built with an invalid path or max body."""
    pass


class InvalidMethodError(EdgeGridError):
    """Raised when asked to sign an unsupported HTTP method."""
    pass


class BodyOnGetError(EdgeGridError):
    """Raised when a body is supplied for a method without body semantics."""
    pass


class ConfigurationError(EdgeGridError):
    """Raised when signer configuration is invalid."""
    pass
