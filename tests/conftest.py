import sys
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

# Ensure local source package (src/httpbridge) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from httpbridge._config import Config  # noqa: E402
from httpbridge._services._dispatcher import CallbackDispatcher  # noqa: E402
from httpbridge.client import HttpClient  # noqa: E402
from tests.utils.fakes import FakeTransport, Recorder  # noqa: E402


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("HTTPBRIDGE_USER_AGENT", raising=False)
    monkeypatch.delenv("HTTPBRIDGE_MAX_WORKERS", raising=False)
    monkeypatch.delenv("HTTPBRIDGE_LOG_LEVEL", raising=False)


@pytest.fixture
def config() -> Config:
    return Config(user_agent="HttpBridgeTests/1.0", max_workers=2)


@pytest.fixture
def dispatcher() -> CallbackDispatcher:
    return CallbackDispatcher()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(
    config: Config, dispatcher: CallbackDispatcher
) -> Generator[HttpClient, None, None]:
    """Client backed by the real httpx transport (mocked with pytest-httpx)."""
    with HttpClient(config=config, dispatcher=dispatcher) as http_client:
        yield http_client


@pytest.fixture
def anyio_backend() -> str:
    """The async tests use asyncio APIs directly; run them on asyncio only."""
    return "asyncio"
