from ._request_dispatcher import (
    RequestDispatcher,
    TransportHook,
    format_query_params,
    parse_response_body,
    select_method,
)

__all__ = [
    "RequestDispatcher",
    "TransportHook",
    "format_query_params",
    "parse_response_body",
    "select_method",
]
