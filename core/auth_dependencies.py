"""
FastAPI Authentication Dependencies

Bearer-token guard shared by every protected route. The token is verified
before the route handler (and so the vault service) runs.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from typing import Optional
import logging

from core.jwt_manager import TokenValidationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def get_auth_service(request: Request):
    """Get the authentication service built at startup"""
    auth_service = getattr(request.app.state, "auth_service", None)
    if auth_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Auth service not initialized",
        )
    return auth_service


async def require_bearer_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service=Depends(get_auth_service),
) -> str:
    """
    认证依赖：要求有效的 Bearer token

    Returns:
        subject: token 中的用户名

    Raises:
        HTTPException 401: token 缺失、过期或无效

    使用示例：
        @app.get("/api/resource")
        async def get_resource(subject: str = Depends(require_bearer_token)):
            ...
    """
    if credentials is None or not credentials.credentials:
        logger.debug(f"Missing bearer token on {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers=_UNAUTHORIZED_HEADERS,
        )

    try:
        return auth_service.verify_token(credentials.credentials)
    except TokenValidationError:
        logger.info(f"Rejected invalid bearer token on {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers=_UNAUTHORIZED_HEADERS,
        )


__all__ = [
    "bearer_scheme",
    "get_auth_service",
    "require_bearer_token",
]
