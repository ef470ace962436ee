import pytest


@pytest.fixture(autouse=True)
def quiet_cli_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep request diagnostics out of the captured command output."""
    monkeypatch.setenv("HTTPBRIDGE_LOG_LEVEL", "CRITICAL")
