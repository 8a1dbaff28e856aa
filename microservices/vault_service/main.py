"""
Vault Microservice

Login, bearer-token guard and encrypted secret storage.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request, status

from core.auth_dependencies import get_auth_service, require_bearer_token
from core.config import VaultConfig, get_settings
from core.logger import setup_service_logger
from microservices.auth_service.auth_service import AuthenticationService
from microservices.auth_service.models import LoginRequest, TokenResponse
from microservices.auth_service.protocols import AuthenticationError

from . import __version__
from .factory import create_auth_service, create_vault_repository, create_vault_service
from .models import (
    CreateSecretRequest,
    CreateSecretResponse,
    HealthResponse,
    SecretResponse,
)
from .protocols import (
    DecryptionError,
    ManagedRepositoryProtocol,
    VaultNotFoundError,
    VaultServiceError,
)
from .vault_service import VaultService

logger = logging.getLogger(__name__)

SECRET_CREATED_MESSAGE = "Secret stored successfully (and encrypted!)"


def get_vault_service(request: Request) -> VaultService:
    """Get vault service instance"""
    vault_service = getattr(request.app.state, "vault_service", None)
    if vault_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Vault service not initialized",
        )
    return vault_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Configuration errors are fatal: let them abort startup
    config = app.state.config or get_settings()
    service_logger = setup_service_logger(config.service_name, config.logging)

    repository = app.state.repository
    if repository is None:
        repository = create_vault_repository(config)
    await repository.initialize()

    app.state.vault_service = create_vault_service(config, repository)
    app.state.auth_service = create_auth_service(config)
    app.state.store = repository
    app.state.store_name = type(repository).__name__
    service_logger.info(
        f"✅ Vault Service started ({app.state.store_name}) on port {config.service_port}"
    )

    try:
        yield
    finally:
        try:
            await repository.close()
        except Exception as e:
            service_logger.error(f"❌ Failed to close repository: {type(e).__name__}")
        app.state.vault_service = None
        app.state.auth_service = None
        app.state.store = None
        service_logger.info("Vault Service shutting down...")


def create_app(
    config: Optional[VaultConfig] = None,
    repository: Optional[ManagedRepositoryProtocol] = None,
) -> FastAPI:
    """
    Create the FastAPI application

    Args:
        config: Vault configuration (loaded from environment at startup if not provided)
        repository: Repository override (built from config if not provided)
    """
    app = FastAPI(
        title="Vault Service",
        description="Encrypted secret storage behind short-lived bearer tokens",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.repository = repository
    app.state.vault_service = None
    app.state.auth_service = None
    app.state.store = None
    app.state.store_name = None

    # ============ Health Endpoints ============

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check"""
        return HealthResponse(
            status="healthy" if request.app.state.vault_service else "starting",
            service="vault_service",
            version=__version__,
            store=request.app.state.store_name,
        )

    @app.get("/health/detailed", response_model=HealthResponse)
    async def detailed_health_check(request: Request):
        """Health check including a round trip to the secret store"""
        store = request.app.state.store
        if store is None:
            return HealthResponse(status="starting", service="vault_service", version=__version__)

        store_healthy = await store.health_check()
        if not store_healthy:
            logger.warning(f"Secret store {request.app.state.store_name} failed its health check")
        return HealthResponse(
            status="healthy" if store_healthy else "degraded",
            service="vault_service",
            version=__version__,
            store=request.app.state.store_name,
            store_healthy=store_healthy,
        )

    # ============ Authentication Endpoints ============

    @app.post("/api/v1/auth/login", response_model=TokenResponse)
    async def login(
        request_data: LoginRequest,
        auth_service: AuthenticationService = Depends(get_auth_service),
    ):
        """Exchange demo credentials for a 10-minute access token"""
        try:
            return auth_service.login(request_data.username, request_data.password)
        except AuthenticationError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

    # ============ Vault Secret Endpoints ============

    @app.post("/api/v1/vault/secrets", response_model=CreateSecretResponse)
    async def create_secret(
        request_data: CreateSecretRequest,
        subject: str = Depends(require_bearer_token),
        vault_service: VaultService = Depends(get_vault_service),
    ):
        """Encrypt and store a new secret"""
        try:
            secret_id = await vault_service.create_secret(
                request_data.name, request_data.value
            )
            logger.info(f"Secret {secret_id} created by {subject}")
            return CreateSecretResponse(message=SECRET_CREATED_MESSAGE, id=secret_id)

        except VaultServiceError as e:
            logger.error(f"Error creating secret: {e}")
            raise HTTPException(status_code=500, detail="Failed to create secret")

    @app.get("/api/v1/vault/secrets/{secret_id}", response_model=SecretResponse)
    async def get_secret(
        secret_id: str,
        subject: str = Depends(require_bearer_token),
        vault_service: VaultService = Depends(get_vault_service),
    ):
        """Get a secret by ID, decrypted"""
        try:
            return await vault_service.get_secret(secret_id)

        except VaultNotFoundError:
            raise HTTPException(status_code=404, detail="Secret not found")
        except DecryptionError as e:
            logger.error(f"Secret {secret_id} could not be decrypted ({e.reason.value})")
            raise HTTPException(status_code=500, detail="Secret could not be decrypted")
        except VaultServiceError as e:
            logger.error(f"Error getting secret {secret_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to get secret")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "microservices.vault_service.main:app",
        host=settings.service_host,
        port=settings.service_port,
        reload=settings.debug,
        log_level=settings.logging.log_level.lower(),
    )
