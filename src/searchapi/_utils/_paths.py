"""Path template resolution."""

import re
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import quote

from ..models.errors import PathResolutionError

PLACEHOLDER_PATTERN = re.compile(r"\{([a-z_\-]+)\}")

# Index lists ("a,b") and wildcards ("logs-*") are part of the path grammar.
_SAFE_SEGMENT_CHARS = ",*"


def format_path_value(value: Any) -> str:
    """Render a scope value as a single, percent-encoded path segment.

    Examples:
        >>> format_path_value(["logs-1", "logs-2"])
        'logs-1,logs-2'
        >>> format_path_value("a/b")
        'a%2Fb'
    """
    if isinstance(value, (list, tuple)):
        value = ",".join(str(item) for item in value)
    return quote(str(value), safe=_SAFE_SEGMENT_CHARS)


def fill_template(
    template: str,
    scope: Mapping[str, Any],
    default_scope: Optional[Mapping[str, Any]] = None,
) -> str:
    """Substitute every ``{name}`` found in ``scope`` or ``default_scope``.

    Placeholders with no value in either mapping are left in place.
    """
    defaults = default_scope or {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in scope:
            return format_path_value(scope[name])
        if name in defaults:
            return format_path_value(defaults[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def resolve_path(
    templates: Iterable[str],
    scope: Mapping[str, Any],
    default_scope: Optional[Mapping[str, Any]] = None,
) -> str:
    """Pick the most specific template that can be fully resolved.

    Templates are tried longest first; ties keep their declared order. The
    first one left without ``{`` after substitution wins.

    Args:
        templates: Candidate path templates, e.g. ``["/{index}/_doc/{id}"]``.
        scope: Per-call scope, takes precedence.
        default_scope: Client-level scope.

    Returns:
        str: The resolved path.

    Raises:
        PathResolutionError: If no template can be filled completely.
    """
    candidates = list(templates)
    for template in sorted(candidates, key=len, reverse=True):
        path = fill_template(template, scope, default_scope)
        if "{" not in path:
            return path

    merged = {**(default_scope or {}), **scope}
    raise PathResolutionError(candidates, merged)
