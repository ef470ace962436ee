import pytest
from pydantic import ValidationError

from httpbridge._config import Config


class TestConfig:
    def test_defaults(self):
        config = Config.from_env({})

        assert config.user_agent == "HttpBridge/1.0"
        assert config.max_workers == 4
        assert config.log_level == "WARNING"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HTTPBRIDGE_USER_AGENT", "Agent/2.0")
        monkeypatch.setenv("HTTPBRIDGE_MAX_WORKERS", "8")
        monkeypatch.setenv("HTTPBRIDGE_LOG_LEVEL", "DEBUG")

        config = Config.from_env()

        assert config.user_agent == "Agent/2.0"
        assert config.max_workers == 8
        assert config.log_level == "DEBUG"

    def test_empty_values_keep_defaults(self):
        config = Config.from_env({"HTTPBRIDGE_USER_AGENT": ""})
        assert config.user_agent == "HttpBridge/1.0"

    def test_rejects_invalid_worker_count(self):
        with pytest.raises(ValidationError):
            Config.from_env({"HTTPBRIDGE_MAX_WORKERS": "0"})
