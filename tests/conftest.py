import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/searchapi) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from searchapi import Client  # noqa: E402
from searchapi._config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "SEARCHAPI_URL",
        "SEARCHAPI_VERSION",
        "SEARCHAPI_READ_TIMEOUT",
        "SEARCHAPI_OPEN_TIMEOUT",
        "SEARCHAPI_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "http://localhost:9200"


@pytest.fixture
def version() -> str:
    return "7.10.2"


@pytest.fixture
def config(base_url: str, version: str) -> Config:
    return Config(url=base_url, version=version)


@pytest.fixture
def client(base_url: str, version: str) -> Generator[Client, None, None]:
    """A client with a known version, so no bootstrap request is sent."""
    client = Client(url=base_url, version=version)
    yield client
    client.close()
