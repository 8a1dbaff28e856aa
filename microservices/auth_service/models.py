"""
Authentication Service Models

Request and response models for the login endpoint.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login credentials"""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """Issued access token"""
    token: str = Field(..., description="Signed JWT access token")
    expires: datetime = Field(..., description="Token expiry (UTC)")
