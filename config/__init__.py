import os

ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module() -> str:
    """Settings module for FLEXTIME_ENV (falls back to APP_ENV, then development)."""
    env = os.getenv("FLEXTIME_ENV") or os.getenv("APP_ENV") or "development"
    return ENVIRONMENTS.get(env.strip().lower(), "config.development")
