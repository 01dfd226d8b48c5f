"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class CoreMoneyConfig(BaseSettings):
    """core_money library configuration"""

    model_config = SettingsConfigDict(
        env_prefix="CORE_MONEY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Currency registry configuration
    include_crypto: bool = True
    currencies_file: Optional[str] = None  # JSON table of user-defined currencies
    currencies_set_name: str = "custom"


# Global configuration instance
config = CoreMoneyConfig()


def get_config() -> CoreMoneyConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> CoreMoneyConfig:
    """Reload configuration from environment"""
    global config
    config = CoreMoneyConfig()
    return config
