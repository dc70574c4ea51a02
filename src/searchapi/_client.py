from logging import getLogger
from os import environ as env
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from dotenv import load_dotenv
from httpx import Client as HttpxClient
from pydantic import ValidationError as PydanticValidationError

from ._config import Config
from ._services import RequestDispatcher, TransportHook
from ._utils import Scope, setup_logging
from ._utils.constants import (
    DEFAULT_OPEN_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_URL,
    ENV_DEBUG,
    ENV_OPEN_TIMEOUT,
    ENV_READ_TIMEOUT,
    ENV_URL,
    ENV_VERSION,
    LOGGER_NAME,
)
from .catalog import load_catalog, parse_catalog
from .models import ApiSpec
from .models.errors import ConfigurationError, UnknownOperationError

load_dotenv()


class Client:
    """Client for a versioned search cluster REST API.

    On construction the client opens its HTTP connection, detects the server
    version with ``GET /`` unless one is given, and loads the API catalog for
    that version's major.minor. Operations are then invoked by name::

        client = Client(scope={"index": "users"})
        client.call("index", id="42", body={"name": "Alice"})
        client.call("get", id="42")
        client.call("exists", id="43")  # -> False

    Args:
        url: Cluster base URL. Falls back to ``SEARCHAPI_URL``, then
            ``http://localhost:9200``.
        scope: Default values for path placeholders (``index``, ``type``,
            ``id``).
        version: Server version. When missing (and ``SEARCHAPI_VERSION`` is
            unset) it is read from the cluster.
        read_timeout: Default read timeout in seconds.
        open_timeout: Connect timeout in seconds.
        configure_transport: Called once with the httpx client keyword
            arguments before the connection is created.
        catalog: Explicit operation name -> spec mapping, replacing the
            versioned catalog lookup.
        debug: Enable debug logging.
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        scope: Mapping[str, Any] | None = None,
        version: str | None = None,
        read_timeout: float | None = None,
        open_timeout: float | None = None,
        configure_transport: TransportHook | None = None,
        catalog: Mapping[str, Union[ApiSpec, Mapping[str, Any]]] | None = None,
        debug: bool | None = None,
    ) -> None:
        try:
            self._config = Config(
                url=url or env.get(ENV_URL) or DEFAULT_URL,
                read_timeout=read_timeout
                if read_timeout is not None
                else env.get(ENV_READ_TIMEOUT) or DEFAULT_READ_TIMEOUT,
                open_timeout=open_timeout
                if open_timeout is not None
                else env.get(ENV_OPEN_TIMEOUT) or DEFAULT_OPEN_TIMEOUT,
                version=version or env.get(ENV_VERSION),
                debug=debug if debug is not None else env.get(ENV_DEBUG) or False,
            )
        except PydanticValidationError as e:
            raise ConfigurationError(str(e)) from e

        setup_logging(self._config.debug)
        self._logger = getLogger(LOGGER_NAME)
        self._logger.debug(f"CONFIG: {self._config.model_dump()}")

        self._scope = Scope(scope)
        self._configure_transport = configure_transport
        self._dispatcher = RequestDispatcher(self._config, configure_transport)

        try:
            self._version = self._config.version or self._dispatcher.fetch_version()
            specs = (
                parse_catalog(catalog)
                if catalog is not None
                else load_catalog(self._version)
            )
        except Exception:
            self._dispatcher.close()
            raise

        self._api_specs: Mapping[str, ApiSpec] = MappingProxyType(dict(specs))

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def version(self) -> str:
        return self._version

    @property
    def read_timeout(self) -> float:
        return self._config.read_timeout

    @property
    def open_timeout(self) -> float:
        return self._config.open_timeout

    @property
    def api_specs(self) -> Mapping[str, ApiSpec]:
        return self._api_specs

    @property
    def operations(self) -> list[str]:
        return sorted(self._api_specs)

    @property
    def connection(self) -> HttpxClient:
        return self._dispatcher.connection

    def scoped(self, new_scope: Optional[Mapping[str, Any]] = None) -> "Client":
        """Return a new client whose default scope is this one's plus ``new_scope``.

        The new client shares URL, version, timeouts and catalog but opens its
        own connection. This client is left unchanged.
        """
        return Client(
            url=self.url,
            scope=self._scope.merged(new_scope),
            version=self.version,
            read_timeout=self.read_timeout,
            open_timeout=self.open_timeout,
            configure_transport=self._configure_transport,
            catalog=self._api_specs,
            debug=self._config.debug,
        )

    def call(
        self, operation: str, /, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Any:
        """Invoke a catalog operation by name.

        Args:
            operation: Operation name, e.g. ``search`` or ``indices.create``.
            params: Call parameters as a mapping. Merged with ``kwargs``;
                ``kwargs`` win.

        Returns:
            The parsed response body, or a boolean for HEAD operations.

        Raises:
            UnknownOperationError: If the loaded catalog has no such operation.

        Examples:
            ```python
            client.call("search", index="users", body={"query": {"match_all": {}}})
            client.call("bulk", body=[{"index": {"_index": "users"}}, {"name": "Bob"}])
            ```
        """
        api_spec = self._api_specs.get(operation)
        if api_spec is None:
            raise UnknownOperationError(operation, self._version)
        return self.request(api_spec, {**(params or {}), **kwargs})

    def request(
        self,
        api_spec: Union[ApiSpec, Mapping[str, Any]],
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Dispatch an ad-hoc spec that is not part of the catalog."""
        if not isinstance(api_spec, ApiSpec):
            api_spec = parse_catalog({"request": api_spec})["request"]
        return self._dispatcher.dispatch(api_spec, params or {}, self._scope)

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(url={self.url!r}, version={self.version!r}, scope={self._scope!r})"
