from typing import Any

from httpx import Response, TransportError

__all__ = [
    "SearchApiError",
    "ConfigurationError",
    "ValidationError",
    "UnknownOperationError",
    "PathResolutionError",
    "UnsupportedVersionError",
    "ResponseError",
    "ServerError",
    "RequestError",
    "TransportError",
]


class SearchApiError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(SearchApiError):
    """Raised when the client settings are invalid."""


class ValidationError(SearchApiError):
    """Raised before any network I/O when a call cannot be built.

    Covers a missing required body and an HTTP verb the dispatcher does not
    know how to send. Always the caller's fault; never retried.
    """


class UnknownOperationError(ValidationError):
    def __init__(self, name: str, version: str | None = None):
        self.name = name
        self.version = version
        suffix = f" for version {version}" if version else ""
        self.message = f"Unknown API operation '{name}'{suffix}"
        super().__init__(self.message)


class PathResolutionError(SearchApiError):
    """Raised when none of the path templates can be filled from the scope."""

    def __init__(self, paths: list[str], scope: dict[str, Any]):
        self.paths = paths
        self.scope = scope
        self.message = f"API path not found: paths: {paths}, scope: {scope}"
        super().__init__(self.message)


class UnsupportedVersionError(SearchApiError):
    """Raised when the server version is unknown or has no catalog."""


class ResponseError(SearchApiError):
    """An error carrying the HTTP response that triggered it.

    Attributes:
        response: The raw httpx response.
        status_code: HTTP status of the response.
        body: Parsed response body (JSON document or text).
    """

    def __init__(self, response: Response, body: Any = None):
        self.response = response
        self.status_code = response.status_code
        self.body = body
        self.message = self._build_message()
        super().__init__(self.message)

    def _build_message(self) -> str:
        reason: Any = None
        if isinstance(self.body, dict):
            error = self.body.get("error")
            if isinstance(error, dict):
                reason = error.get("reason") or error.get("type")
            else:
                reason = error
        elif isinstance(self.body, str) and self.body:
            reason = self.body[:200]

        request = self.response.request
        message = f"{request.method} {request.url.path} returned {self.status_code}"
        if reason:
            message = f"{message}: {reason}"
        return message


class ServerError(ResponseError):
    """The server failed independently of the request's correctness (5xx)."""


class RequestError(ResponseError):
    """The server understood the request but rejected it."""
