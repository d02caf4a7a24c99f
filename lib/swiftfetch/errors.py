from __future__ import annotations

TIMEOUT_MESSAGE = "Request timed out"
UNKNOWN_MESSAGE = "An unknown error occurred"
ERROR_PREFIX = "SwiftFetch Error"


class SwiftFetchError(Exception):
    """Base client error."""


class RequestTimeoutError(SwiftFetchError):
    """The per-request deadline expired before the transport settled."""

    def __init__(self, message: str = TIMEOUT_MESSAGE):
        super().__init__(message)


class TransportError(SwiftFetchError):
    """Transport/network layer error, or a body that failed to parse or serialize."""


class UnknownError(SwiftFetchError):
    """The failure was not an exception, so nothing about it can be reported."""

    def __init__(self, message: str = UNKNOWN_MESSAGE):
        super().__init__(message)


def normalize_error(exc: object, *, timed_out: bool = False) -> SwiftFetchError:
    if isinstance(exc, SwiftFetchError):
        return exc
    if timed_out:
        return RequestTimeoutError()
    if not isinstance(exc, BaseException):
        return UnknownError()
    # some httpx errors carry no message; fall back to the type name
    detail = str(exc) or type(exc).__name__
    return TransportError(f"{ERROR_PREFIX}: {detail}")
