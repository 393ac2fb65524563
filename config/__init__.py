import os

DEFAULT_ENV = "development"

_SETTINGS_BY_ENV = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; unknown values fall back to development."""
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    return _SETTINGS_BY_ENV.get(env, _SETTINGS_BY_ENV[DEFAULT_ENV])
