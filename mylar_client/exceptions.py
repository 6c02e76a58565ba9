"""
Custom exceptions for the Mylar API client

Every failure the client can produce derives from MylarException so callers
can catch the whole family in one place.
"""


class MylarException(Exception):
    """Base exception for all client errors."""
    pass


class ConfigError(MylarException, ValueError):
    """Raised when the client is constructed with missing or invalid settings."""
    pass


class TransportError(MylarException):
    """Exception for network or connection failures reported by the HTTP layer."""
    pass


class DecodeError(MylarException):
    """Raised when a response body does not match the expected JSON shape."""
    pass


class APIError(MylarException):
    """
    Error reported by the server through the structured response envelope.

    Attributes:
        code: Server-supplied error code
        message: Server-supplied error message
    """

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"error {code}: {message}")
