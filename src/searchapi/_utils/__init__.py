from ._body import JsonBody, LineFramedBody, RawBody, RequestBody, normalize_body
from ._logs import setup_logging
from ._paths import fill_template, format_path_value, resolve_path
from ._request_spec import RequestSpec
from ._scope import Scope, extract_scopes
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "JsonBody",
    "LineFramedBody",
    "RawBody",
    "RequestBody",
    "normalize_body",
    "setup_logging",
    "fill_template",
    "format_path_value",
    "resolve_path",
    "RequestSpec",
    "Scope",
    "extract_scopes",
    "get_httpx_client_kwargs",
]
