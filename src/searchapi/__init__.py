from ._client import Client
from ._utils import Scope
from .catalog import available_versions, load_catalog, register_catalog
from .models import ApiSpec
from .models.errors import (
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
    "Client",
    "Scope",
    "ApiSpec",
    "available_versions",
    "load_catalog",
    "register_catalog",
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
