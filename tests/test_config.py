from __future__ import annotations

import importlib

import pytest

import config


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("dev", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_by_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert config.get_settings_module() == module


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert config.get_settings_module() == "config.development"


def test_production_has_no_fallback_signing_secret(monkeypatch):
    monkeypatch.delenv("LINK_SIGNING_SECRET", raising=False)
    production = importlib.import_module("config.production")
    try:
        assert importlib.reload(production).LINK_SIGNING_SECRET == ""
    finally:
        monkeypatch.undo()
        importlib.reload(production)
