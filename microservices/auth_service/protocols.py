"""
Authentication Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from datetime import datetime
from typing import Optional, Protocol, Tuple, runtime_checkable


class AuthenticationError(Exception):
    """Raised when the supplied username/password is rejected"""
    pass


@runtime_checkable
class TokenManagerProtocol(Protocol):
    """
    Interface for the token issuer/verifier.

    Implementations must provide these methods.
    Used for dependency injection to enable testing.
    """

    def create_access_token(
        self, subject: str, now: Optional[datetime] = None
    ) -> Tuple[str, datetime]:
        """Issue a signed token for subject, returning (token, expires_at)"""
        ...

    def verify_token(self, token: str) -> str:
        """Verify token and return its subject (raises TokenValidationError)"""
        ...
