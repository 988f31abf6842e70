import pytest

from lens_ocr import settings
from lens_ocr.domain.errors import ConfigurationError


def test_env_float_uses_default_when_unset(monkeypatch) -> None:
    monkeypatch.delenv("LENS_TIMEOUT_SECONDS", raising=False)
    assert settings._env_float("LENS_TIMEOUT_SECONDS", 20.0) == 20.0


def test_env_float_parses_value(monkeypatch) -> None:
    monkeypatch.setenv("LENS_TIMEOUT_SECONDS", " 7.5 ")
    assert settings._env_float("LENS_TIMEOUT_SECONDS", 20.0) == 7.5


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_env_float_rejects_invalid_timeouts(monkeypatch, raw) -> None:
    monkeypatch.setenv("LENS_TIMEOUT_SECONDS", raw)
    with pytest.raises(ConfigurationError) as excinfo:
        settings._env_float("LENS_TIMEOUT_SECONDS", 20.0)
    assert excinfo.value.stage == "config"


def test_env_log_level_normalizes_case(monkeypatch) -> None:
    monkeypatch.setenv("LENS_LOG_LEVEL", "debug")
    assert settings._env_log_level("LENS_LOG_LEVEL", "WARNING") == "DEBUG"


def test_env_log_level_rejects_unknown_names(monkeypatch) -> None:
    monkeypatch.setenv("LENS_LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError, match="LENS_LOG_LEVEL"):
        settings._env_log_level("LENS_LOG_LEVEL", "WARNING")
