"""Tests for greeter.config: AppConfig frozen dataclass and env loading."""

import pytest

from greeter.config import AppConfig
from greeter.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    import os

    for key in list(os.environ):
        if key.startswith("GREETER_"):
            monkeypatch.delenv(key)


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.workers == 0
        assert cfg.service_name == "greeter-api"
        assert cfg.version == "1.0.0"
        assert cfg.default_name == "World"
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, service_name="edge")

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.service_name == "edge"

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_json_log_format(self) -> None:
        assert AppConfig(log_format="json").log_format == "json"

    @pytest.mark.parametrize("field", ["log_level", "log_format"])
    def test_invalid_logging_setting(self, field: str) -> None:
        with pytest.raises(ConfigurationError, match=field):
            AppConfig(**{field: "nope"})


class TestFromEnv:
    def test_empty_env_gives_defaults(self) -> None:
        assert AppConfig.from_env() == AppConfig()

    def test_reads_prefixed_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_PORT", "9000")
        monkeypatch.setenv("GREETER_SERVICE_NAME", "symfony-edge")
        monkeypatch.setenv("GREETER_DEBUG", "yes")

        cfg = AppConfig.from_env()

        assert cfg.port == 9000
        assert cfg.service_name == "symfony-edge"
        assert cfg.debug is True

    def test_false_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_DEBUG", "off")
        assert AppConfig.from_env().debug is False

    def test_unknown_variables_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_NOT_A_FIELD", "x")
        assert AppConfig.from_env() == AppConfig()

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_PORT", "9000")
        assert AppConfig.from_env(port=7000).port == 7000

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HELLO_VERSION", "2.0.0")
        assert AppConfig.from_env(prefix="HELLO_").version == "2.0.0"

    def test_bad_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_PORT", "eighty")
        with pytest.raises(ConfigurationError, match="GREETER_PORT"):
            AppConfig.from_env()

    def test_bad_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_DEBUG", "maybe")
        with pytest.raises(ConfigurationError, match="not a boolean"):
            AppConfig.from_env()

    def test_log_level_case_folded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_LOG_LEVEL", "DEBUG")
        assert AppConfig.from_env().log_level == "debug"

    def test_bad_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_LOG_LEVEL", "verbose")
        with pytest.raises(ConfigurationError, match="log_level='verbose'"):
            AppConfig.from_env()

    def test_bad_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_LOG_FORMAT", "xml")
        with pytest.raises(ConfigurationError, match="log_format='xml'"):
            AppConfig.from_env()
