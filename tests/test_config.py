from decimal import Decimal

import pytest

from lunch_tray import config


def test_tax_rate_defaults(monkeypatch):
    monkeypatch.delenv("LUNCH_TRAY_TAX_RATE", raising=False)
    assert config.resolve_tax_rate() == Decimal("0.08")


def test_tax_rate_env_override(monkeypatch):
    monkeypatch.setenv("LUNCH_TRAY_TAX_RATE", " 0.0725 ")
    assert config.resolve_tax_rate() == Decimal("0.0725")


@pytest.mark.parametrize("raw", ["eight percent", "1", "-0.01", "NaN"])
def test_tax_rate_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv("LUNCH_TRAY_TAX_RATE", raw)
    with pytest.raises(ValueError):
        config.resolve_tax_rate()


def test_debug_log_path_and_level(monkeypatch):
    monkeypatch.delenv("LUNCH_TRAY_DEBUG_LOG", raising=False)
    monkeypatch.delenv("LUNCH_TRAY_LOG_LEVEL", raising=False)
    assert config.resolve_debug_log_path() == config.DEBUG_LOG_PATH_DEFAULT
    assert config.resolve_log_level() == "INFO"

    monkeypatch.setenv("LUNCH_TRAY_DEBUG_LOG", "/tmp/elsewhere.log")
    monkeypatch.setenv("LUNCH_TRAY_LOG_LEVEL", "debug")
    assert config.resolve_debug_log_path() == "/tmp/elsewhere.log"
    assert config.resolve_log_level() == "DEBUG"
