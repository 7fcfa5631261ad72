"""FastAPI dependency injection."""

from mortgage_calc.config import Settings, settings


def get_settings() -> Settings:
    return settings
