"""
Authentication Service

Checks demo credentials and issues access tokens; verifies tokens
presented on vault requests.
"""

import logging

from .models import TokenResponse
from .password_utils import authenticate
from .protocols import AuthenticationError, TokenManagerProtocol

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Login and bearer-token verification against configured credentials"""

    def __init__(
        self,
        token_manager: TokenManagerProtocol,
        username: str,
        password_hash: str,
    ):
        """
        Initialize authentication service

        Args:
            token_manager: Token issuer/verifier bound to the signing key
            username: Configured demo username
            password_hash: Bcrypt hash of the configured demo password
        """
        self.token_manager = token_manager
        self._username = username
        self._password_hash = password_hash

    def login(self, username: str, password: str) -> TokenResponse:
        """
        Authenticate and issue a token

        Raises:
            AuthenticationError: If the credentials do not match
        """
        if not authenticate(username, password, self._username, self._password_hash):
            logger.info("Login rejected: invalid credentials")
            raise AuthenticationError("Invalid credentials")

        token, expires_at = self.token_manager.create_access_token(username)
        logger.info(f"Issued access token for subject: {username}")
        return TokenResponse(token=token, expires=expires_at)

    def verify_token(self, token: str) -> str:
        """Verify a bearer token and return its subject"""
        return self.token_manager.verify_token(token)
