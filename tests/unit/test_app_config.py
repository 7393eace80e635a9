import pytest

from pistonctl.config import AppConfig
from pistonctl.control_loops import SettingsDefaults


def test_defaults(monkeypatch):
    for name in ("PISTONCTL_DEFAULT_RETRACT_SPEED", "PISTONCTL_DEFAULT_AUTO_EXTEND", "PISTONCTL_BASE_TICK_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()

    assert config.default_retract_speed == 0.5
    assert config.default_extend_speed == 0.5
    assert config.default_auto_retract is False
    assert config.default_auto_extend is False
    assert config.base_tick_seconds == pytest.approx(1 / 60)


def test_env_overrides_flow_into_settings_defaults(monkeypatch):
    monkeypatch.setenv("PISTONCTL_DEFAULT_RETRACT_SPEED", "1.5")
    monkeypatch.setenv("PISTONCTL_DEFAULT_AUTO_EXTEND", "yes")

    defaults = SettingsDefaults.from_config(AppConfig())

    assert defaults.retract_speed == 1.5
    assert defaults.auto_extend is True


def test_invalid_number_names_the_variable(monkeypatch):
    monkeypatch.setenv("PISTONCTL_PORT", "eighty")

    with pytest.raises(ValueError, match="PISTONCTL_PORT"):
        AppConfig()


def test_non_positive_default_speed_is_rejected(monkeypatch):
    monkeypatch.setenv("PISTONCTL_DEFAULT_EXTEND_SPEED", "0")

    with pytest.raises(ValueError):
        AppConfig()


def test_production_requires_secret(monkeypatch):
    monkeypatch.setenv("PISTONCTL_ENV", "production")
    monkeypatch.delenv("PISTONCTL_SECRET_KEY", raising=False)

    with pytest.raises(RuntimeError):
        AppConfig()
