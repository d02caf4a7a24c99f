from .client import HttpClient, Response
from .config_types import ClientConfig, RequestSpec
from .errors import RequestTimeoutError, SwiftFetchError, TransportError, UnknownError

__all__ = [
    "HttpClient",
    "Response",
    "ClientConfig",
    "RequestSpec",
    "SwiftFetchError",
    "RequestTimeoutError",
    "TransportError",
    "UnknownError",
]
