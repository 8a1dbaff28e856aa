#!/usr/bin/env python3
"""Configuration system for SecureVault

Configuration hierarchy:
- vault_config: credentials, token signing and encryption settings (required)
- logging_config: logging configuration
"""
import os
from typing import Optional

from dotenv import load_dotenv

from .logging_config import LoggingConfig
from .vault_config import ConfigurationError, VaultConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Loaded lazily: a missing option must fail at startup, not at import
settings: Optional[VaultConfig] = None


def get_settings() -> VaultConfig:
    """Get global settings instance"""
    global settings
    if settings is None:
        settings = VaultConfig.from_env()
    return settings


def reload_settings() -> VaultConfig:
    """Reload settings from environment"""
    global settings
    settings = VaultConfig.from_env()
    return settings


__all__ = [
    'VaultConfig',
    'LoggingConfig',
    'ConfigurationError',
    'get_settings',
    'reload_settings',
    'settings',
]
