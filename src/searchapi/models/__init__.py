from .api_spec import ApiSpec, BodySpec, UrlSpec
from .errors import (
    ConfigurationError,
    PathResolutionError,
    RequestError,
    ResponseError,
    SearchApiError,
    ServerError,
    TransportError,
    UnknownOperationError,
    UnsupportedVersionError,
    ValidationError,
)

__all__ = [
    "ApiSpec",
    "BodySpec",
    "UrlSpec",
    "ConfigurationError",
    "PathResolutionError",
    "RequestError",
    "ResponseError",
    "SearchApiError",
    "ServerError",
    "TransportError",
    "UnknownOperationError",
    "UnsupportedVersionError",
    "ValidationError",
]
