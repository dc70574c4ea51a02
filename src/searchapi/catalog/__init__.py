"""Versioned API catalogs.

A catalog maps an operation name (``search``, ``indices.create``, ...) to its
ApiSpec. Catalogs are keyed by the ``major_minor`` part of the server version
and come either from the JSON files shipped in this package
(``rest_api_v7_10.json``) or from :func:`register_catalog`.
"""

import json
from functools import lru_cache
from importlib.resources import files
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from ..models import ApiSpec
from ..models.errors import ConfigurationError, UnsupportedVersionError

_CATALOG_FILE_PREFIX = "rest_api_v"
_CATALOG_FILE_SUFFIX = ".json"

_registered: dict[str, dict[str, ApiSpec]] = {}


def catalog_key(version: str) -> str:
    """Return the catalog key for a server version.

    Examples:
        >>> catalog_key("7.10.2")
        '7_10'
        >>> catalog_key("8.0.0-SNAPSHOT")
        '8_0'
    """
    parts = str(version).split(".")
    if len(parts) < 2 or not parts[0].isdigit() or not parts[1].isdigit():
        raise UnsupportedVersionError(f"Invalid server version: {version!r}")
    return f"{parts[0]}_{parts[1]}"


def parse_catalog(data: Mapping[str, Any]) -> dict[str, ApiSpec]:
    """Validate raw catalog data into a name -> ApiSpec mapping."""
    catalog: dict[str, ApiSpec] = {}
    for name, spec in data.items():
        if isinstance(spec, ApiSpec):
            catalog[name] = spec
            continue
        try:
            catalog[name] = ApiSpec.model_validate(spec)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid API spec for '{name}': {e}") from e
    return catalog


def register_catalog(version: str, specs: Mapping[str, Any]) -> None:
    """Add or replace the catalog used for ``version``'s major.minor."""
    _registered[catalog_key(version)] = parse_catalog(specs)


def unregister_catalog(version: str) -> None:
    _registered.pop(catalog_key(version), None)


@lru_cache(maxsize=None)
def _load_packaged_catalog(key: str) -> dict[str, ApiSpec]:
    resource = files(__name__) / f"{_CATALOG_FILE_PREFIX}{key}{_CATALOG_FILE_SUFFIX}"
    if not resource.is_file():
        raise UnsupportedVersionError(
            f"No API catalog for version {key.replace('_', '.')}"
        )
    return parse_catalog(json.loads(resource.read_text(encoding="utf-8")))


def load_catalog(version: str) -> Mapping[str, ApiSpec]:
    """Return the catalog for ``version``.

    Registered catalogs take precedence over the packaged ones. The returned
    mapping is a read-only view of the cached catalog.

    Raises:
        UnsupportedVersionError: If the version is malformed or no catalog
            exists for its major.minor.
    """
    key = catalog_key(version)
    if key in _registered:
        return MappingProxyType(_registered[key])
    return MappingProxyType(_load_packaged_catalog(key))


def available_versions() -> list[str]:
    """List the major.minor versions a catalog can be loaded for."""
    keys = set(_registered)
    for resource in files(__name__).iterdir():
        name = resource.name
        if name.startswith(_CATALOG_FILE_PREFIX) and name.endswith(_CATALOG_FILE_SUFFIX):
            keys.add(name[len(_CATALOG_FILE_PREFIX) : -len(_CATALOG_FILE_SUFFIX)])
    return sorted(
        (key.replace("_", ".") for key in keys),
        key=lambda v: tuple(int(p) for p in v.split(".")),
    )
