import pytest
from pydantic import ValidationError

from accounts.config import AuthSettings, Settings, settings


def test_test_mode_settings():
    assert settings.app.MODE == "TEST"
    assert settings.auth.BCRYPT_COST == 4


def test_default_auth_settings():
    auth = AuthSettings()
    assert auth.BCRYPT_COST == 13
    assert auth.PASSWORD_MIN_LENGTH == 6


def test_nested_env_override(monkeypatch):
    monkeypatch.setenv("AUTH__BCRYPT_COST", "6")
    monkeypatch.setenv("APP__JOIN_DATE_FORMAT", "%Y-%m-%d")
    fresh = Settings()
    assert fresh.auth.BCRYPT_COST == 6
    assert fresh.app.JOIN_DATE_FORMAT == "%Y-%m-%d"


def test_cost_out_of_range():
    with pytest.raises(ValidationError):
        AuthSettings(BCRYPT_COST=3)
