"""Tests for environment configuration helpers"""
from rocketshoes.config import _int_env, _optional_float


def test_int_env(monkeypatch):
    monkeypatch.setenv("CART_NOTIFICATION_HISTORY", "5")

    assert _int_env("CART_NOTIFICATION_HISTORY", 20) == 5


def test_int_env_invalid_or_missing_uses_default(monkeypatch):
    monkeypatch.setenv("CART_NOTIFICATION_HISTORY", "lots")
    assert _int_env("CART_NOTIFICATION_HISTORY", 20) == 20

    monkeypatch.delenv("CART_NOTIFICATION_HISTORY")
    assert _int_env("CART_NOTIFICATION_HISTORY", 20) == 20


def test_optional_float(monkeypatch):
    monkeypatch.setenv("ROCKETSHOES_API_TIMEOUT", "2.5")
    assert _optional_float("ROCKETSHOES_API_TIMEOUT") == 2.5

    monkeypatch.setenv("ROCKETSHOES_API_TIMEOUT", "")
    assert _optional_float("ROCKETSHOES_API_TIMEOUT") is None

    monkeypatch.setenv("ROCKETSHOES_API_TIMEOUT", "never")
    assert _optional_float("ROCKETSHOES_API_TIMEOUT") is None
