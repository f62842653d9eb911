"""Settings loading tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from footylab.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("MIN_VALUE", "MAX_VALUE_BETS", "MAX_TEAM_INSIGHTS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    settings = get_settings()
    assert settings.min_value == 5.0
    assert settings.max_value_bets == 20
    assert settings.max_team_insights == 5
    assert settings.log_level == "INFO"


def test_environment_overrides(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MIN_VALUE", "7")
    monkeypatch.setenv("MAX_TEAM_INSIGHTS", "12")
    settings = get_settings()
    assert settings.min_value == 7.0
    assert settings.max_team_insights == 12


def test_settings_are_cached(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    first = get_settings()
    monkeypatch.setenv("MIN_VALUE", "9")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().min_value == 9.0


def test_dotenv_file_is_read(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("MAX_VALUE_BETS=40\nLOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    settings = get_settings()
    assert settings.max_value_bets == 40
    assert settings.log_level == "debug"


@pytest.mark.parametrize(
    ("name", "value"),
    [("MIN_VALUE", "-1"), ("MAX_VALUE_BETS", "0"), ("MAX_VALUE_BETS", "501"), ("MAX_TEAM_INSIGHTS", "101")],
)
def test_out_of_range_values_are_rejected(tmp_path, monkeypatch, name: str, value: str) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
