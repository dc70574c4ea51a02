import re
from logging import getLogger
from typing import Any, Callable, Iterable, Mapping, Optional

from httpx import Client, Response, Timeout

from .._config import Config
from .._utils import (
    RequestSpec,
    extract_scopes,
    get_httpx_client_kwargs,
    normalize_body,
    resolve_path,
)
from .._utils.constants import (
    LOGGER_NAME,
    METHODS_WITHOUT_BODY,
    PARAM_BODY,
    PARAM_READ_TIMEOUT,
    SUPPORTED_METHODS,
)
from ..models import ApiSpec
from ..models.errors import (
    RequestError,
    ServerError,
    UnsupportedVersionError,
    ValidationError,
)

TransportHook = Callable[[dict[str, Any]], None]

_JSON_CONTENT_TYPE = re.compile(r"\bjson$")


def select_method(methods: Iterable[str]) -> str:
    """POST when declared (it carries a body everywhere), else the first verb."""
    verbs = [method.upper() for method in methods]
    if not verbs:
        raise ValidationError("No HTTP request method declared")

    method = "POST" if "POST" in verbs else verbs[0]
    if method not in SUPPORTED_METHODS:
        raise ValidationError(f"Unknown HTTP request method: {method!r}")
    return method


def format_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    query: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(item) for item in value)
        query[key] = value
    return query


def parse_response_body(response: Response) -> Any:
    """JSON document for json content types, text otherwise, None when empty."""
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "").split(";")[0].strip()
    if _JSON_CONTENT_TYPE.search(content_type):
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


class RequestDispatcher:
    """Turns an ApiSpec plus call parameters into exactly one HTTP request.

    The dispatcher owns the httpx connection for its client. The connection is
    created in the constructor and reused for every dispatch; per-call timeout
    overrides are passed per request and never change the connection defaults.
    """

    def __init__(
        self, config: Config, configure_transport: Optional[TransportHook] = None
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs = get_httpx_client_kwargs(
            config.url, config.read_timeout, config.open_timeout
        )
        if configure_transport is not None:
            configure_transport(client_kwargs)

        self._client = Client(**client_kwargs)

    @property
    def connection(self) -> Client:
        return self._client

    def build_request(
        self,
        api_spec: ApiSpec,
        params: Mapping[str, Any],
        default_scope: Optional[Mapping[str, Any]] = None,
    ) -> RequestSpec:
        """Resolve method, path, body, query and timeout without any I/O.

        Raises:
            ValidationError: If a required body is missing or the declared
                method is not supported.
            PathResolutionError: If no path template can be filled.
        """
        if api_spec.body_required and PARAM_BODY not in params:
            raise ValidationError("Body is missing")

        working = dict(params)
        body = normalize_body(working.pop(PARAM_BODY, None))
        scopes = extract_scopes(working)
        timeout = working.pop(PARAM_READ_TIMEOUT, None)

        path = resolve_path(api_spec.url.paths, scopes, default_scope)
        method = select_method(api_spec.methods)

        if method in METHODS_WITHOUT_BODY:
            body = None

        return RequestSpec(
            method=method,
            path=path,
            params=format_query_params(working),
            body=body,
            timeout=timeout,
        )

    def send(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Request: {spec.method} {spec.path}")

        kwargs: dict[str, Any] = {}
        if spec.params:
            kwargs["params"] = spec.params
        if spec.body is not None:
            kwargs["content"] = spec.content
            kwargs["headers"] = spec.headers
        if spec.timeout is not None:
            kwargs["timeout"] = Timeout(spec.timeout, connect=self._config.open_timeout)

        response = self._client.request(spec.method, spec.path, **kwargs)

        self._logger.debug(f"Response: {response.status_code} {spec.method} {spec.path}")
        return response

    def dispatch(
        self,
        api_spec: ApiSpec,
        params: Mapping[str, Any],
        default_scope: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send one request for ``api_spec`` and classify the response.

        Args:
            api_spec: The operation to call.
            params: Call parameters. Scope keys (``index``, ``type``, ``id``),
                ``body`` and ``read_timeout`` are consumed; the rest become
                query parameters. The mapping itself is left untouched.
            default_scope: Client-level scope used for placeholders the call
                does not provide.

        Returns:
            ``True``/``False`` for HEAD requests answered with 200/404,
            otherwise the parsed response body.

        Raises:
            ValidationError: Before any I/O, for a missing body or bad method.
            PathResolutionError: Before any I/O, when no path resolves.
            ServerError: On a 5xx response.
            RequestError: On a response whose body carries an ``error`` key.
            httpx.TransportError: On network failure, unmodified.
        """
        spec = self.build_request(api_spec, params, default_scope)
        response = self.send(spec)

        if spec.method == "HEAD":
            if response.status_code == 200:
                return True
            if response.status_code == 404:
                return False

        return self.handle_response(response)

    def handle_response(self, response: Response) -> Any:
        body = parse_response_body(response)

        if response.status_code >= 500:
            error = ServerError(response, body)
            self._logger.warning(error.message)
            raise error

        if isinstance(body, dict) and "error" in body:
            error = RequestError(response, body)
            self._logger.warning(error.message)
            raise error

        return body

    def fetch_version(self) -> str:
        """Read ``version.number`` from the cluster root endpoint."""
        body = self.handle_response(self.send(RequestSpec(method="GET", path="/")))

        version = body.get("version") if isinstance(body, dict) else None
        number = version.get("number") if isinstance(version, dict) else None
        if not isinstance(number, str) or not number:
            raise UnsupportedVersionError(
                f"Could not detect server version from {self._config.url}"
            )

        self._logger.info(f"Detected server version {number}")
        return number

    def close(self) -> None:
        self._client.close()
