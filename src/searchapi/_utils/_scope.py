from typing import Any, Iterator, Mapping, MutableMapping, Optional

from .constants import SCOPE_KEYS


class Scope(Mapping[str, Any]):
    """Immutable mapping of path placeholder name to value.

    A client holds one default scope; each call may carry its own scope that
    overrides the defaults for that call only. Keys are stored as strings so
    ``Scope({"index": "users"})`` and ``Scope(index="users")`` are equivalent.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        merged = {str(key): value for key, value in (data or {}).items()}
        merged.update(kwargs)
        self._data = {key: value for key, value in merged.items() if value is not None}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Scope({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted((k, repr(v)) for k, v in self._data.items())))

    def merged(self, other: Optional[Mapping[str, Any]]) -> "Scope":
        """Return a new scope where ``other`` overrides this one."""
        if not other:
            return self
        return Scope({**self._data, **other})

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


def extract_scopes(params: MutableMapping[str, Any]) -> Scope:
    """Pop the scope-bearing keys out of ``params``.

    Only ``index``, ``type`` and ``id`` are treated as scope; every other key
    stays in ``params``. ``params`` must be the caller's private working copy.
    """
    scopes: dict[str, Any] = {}
    for key in SCOPE_KEYS:
        value = params.pop(key, None)
        if value is None:
            continue
        scopes[key] = value
    return Scope(scopes)
