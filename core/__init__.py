#!/usr/bin/env python3
"""
Core Module for SecureVault

Shared components used by the auth and vault services.

COMPONENTS:
    - config/: Environment-backed configuration (keys, credentials, logging)
    - jwt_manager.py: Access token issuance and verification
    - auth_dependencies.py: FastAPI bearer-token guard
    - logger.py: Service logger setup

USAGE:
    from core.config import get_settings
    from core.jwt_manager import JWTManager

    settings = get_settings()
    manager = JWTManager(settings.signing_key, settings.jwt_issuer, settings.jwt_audience)
"""

__version__ = "1.0.0"
