import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/restful) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from restful import ClientConfig, RestClient, _api  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for var in (
        "RESTFUL_TIMEOUT",
        "RESTFUL_CONNECT_TIMEOUT",
        "RESTFUL_VERIFY_TLS",
        "RESTFUL_HTTP2",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig()


@pytest.fixture
def client(config: ClientConfig) -> Generator[RestClient, None, None]:
    with RestClient(config) as rest_client:
        yield rest_client


@pytest.fixture
def fresh_default_client(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Start each test without a process-wide client and close the one it creates."""
    monkeypatch.setattr(_api, "_default_client", None)
    yield
    if _api._default_client is not None:
        _api._default_client.close()
