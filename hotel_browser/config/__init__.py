"""Configuration module for Hotel Browser."""

from .app_config import (
    APP_CONFIG,
    AppSettings,
    DatabaseConfig,
    PresenterConfig,
    ApiConfig,
    get_app_settings,
)

__all__ = [
    'APP_CONFIG',
    'AppSettings',
    'DatabaseConfig',
    'PresenterConfig',
    'ApiConfig',
    'get_app_settings',
]
