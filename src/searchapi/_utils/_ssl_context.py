import os
import ssl
from typing import Any, Optional

import httpx

# Checked in order; the first one set wins over the certifi bundle.
_CA_FILE_ENV_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
_CA_DIR_ENV_VAR = "SSL_CERT_DIR"


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def ca_bundle_locations() -> tuple[str, Optional[str]]:
    """CA file and directory used when truststore is not installed."""
    import certifi

    cafile = next(
        (path for path in map(_env_path, _CA_FILE_ENV_VARS) if path),
        certifi.where(),
    )
    return cafile, _env_path(_CA_DIR_ENV_VAR)


def create_ssl_context() -> ssl.SSLContext:
    # System trust store when available, certifi bundle otherwise
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        cafile, capath = ca_bundle_locations()
        return ssl.create_default_context(cafile=cafile, capath=capath)


def get_httpx_client_kwargs(
    base_url: str, read_timeout: float, open_timeout: float
) -> dict[str, Any]:
    """Keyword arguments for the shared httpx client.

    Plain ``http://`` clusters skip building an SSL context.
    """
    kwargs: dict[str, Any] = {
        "base_url": base_url,
        "timeout": httpx.Timeout(read_timeout, connect=open_timeout),
        "follow_redirects": True,
    }
    if base_url.startswith("https://"):
        kwargs["verify"] = create_ssl_context()
    return kwargs
