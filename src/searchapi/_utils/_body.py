"""Request body normalization.

A call's ``body`` parameter is classified into one of three variants:

- ``RawBody``: a string or bytes payload sent as is, the caller owns the
  encoding.
- ``LineFramedBody``: newline-delimited payload used by bulk and multi-search
  endpoints, one JSON document (or pre-encoded line) per line, always ending
  with a newline.
- ``JsonBody``: any other value, serialized as a single JSON document.

Every variant computes its ``content`` once and is frozen afterwards so the
payload handed to the transport cannot change under it.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Union

from .constants import CONTENT_TYPE_JSON, CONTENT_TYPE_NDJSON


def _dump(document: Any) -> str:
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def _frame_line(line: Any) -> str:
    if line is None:
        return ""
    if isinstance(line, Mapping):
        return _dump(line)
    return str(line)


@dataclass(frozen=True)
class RawBody:
    payload: Union[str, bytes]
    content_type: str = CONTENT_TYPE_JSON

    @property
    def content(self) -> Union[str, bytes]:
        return self.payload


@dataclass(frozen=True)
class LineFramedBody:
    lines: tuple[Any, ...]
    content: str = field(init=False)
    content_type: str = CONTENT_TYPE_NDJSON

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", self._frame(self.lines))

    @staticmethod
    def _frame(lines: Sequence[Any]) -> str:
        if all(isinstance(line, Mapping) for line in lines):
            return "\n".join(_dump(line) for line in lines) + "\n"

        framed = list(lines)
        if framed[-1] is not None:
            framed.append(None)
        return "\n".join(_frame_line(line) for line in framed)


@dataclass(frozen=True)
class JsonBody:
    document: Any
    content: str = field(init=False)
    content_type: str = CONTENT_TYPE_JSON

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", _dump(self.document))


RequestBody = Union[RawBody, LineFramedBody, JsonBody]


def normalize_body(value: Any) -> Optional[RequestBody]:
    """Classify a ``body`` call parameter into its wire variant.

    Args:
        value: The raw ``body`` parameter.

    Returns:
        The matching body variant, or ``None`` when there is no body.

    Examples:
        >>> normalize_body(["a", "b"]).content
        'a\\nb\\n'
        >>> normalize_body([{"index": {}}, {"x": 1}]).content
        '{"index":{}}\\n{"x":1}\\n'
    """
    if value is None:
        return None
    if isinstance(value, str):
        return RawBody(value)
    if isinstance(value, (bytes, bytearray)):
        return RawBody(bytes(value))
    if isinstance(value, (list, tuple)):
        return LineFramedBody(tuple(value))
    return JsonBody(value)
