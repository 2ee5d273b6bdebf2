"""
Errors raised by the replitdb clients.

Every failure is surfaced to the immediate caller as one of these types.
Nothing is retried and nothing is swallowed; retry and backoff policy belongs
to the caller.
"""
from typing import Optional


__all__ = ["Error", "ConfigError", "TransportError", "NotFound", "DecodeError", "RemoteError"]


class Error(Exception):
    """Base class for every replitdb error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message}"


class ConfigError(Error, ValueError):
    """A required configuration value is missing or malformed."""


class TransportError(Error):
    """The HTTP exchange failed (connection refused, timeout, DNS failure)."""


class NotFound(Error, KeyError):
    """The requested key does not exist in the database."""

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(message or f"no item named {key!r} was found in the database")
        self.key = key

    def __reduce__(self):
        return type(self), (self.key, self.message)

    # KeyError quotes its argument; keep the readable form.
    __str__ = Error.__str__


class DecodeError(Error):
    """The response body could not be decoded into a value."""


class RemoteError(Error):
    """The service answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(f"{message} (HTTP {status_code})")
        self.reason = message
        self.status_code = status_code

    def __reduce__(self):
        return type(self), (self.reason, self.status_code)
