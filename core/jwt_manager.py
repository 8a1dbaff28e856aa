"""
JWT Token Manager for SecureVault
Issues and verifies short-lived self-contained access tokens
"""

import jwt
import uuid
import logging
from typing import Optional, Tuple
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

ACCESS_TOKEN_EXPIRY = 600  # 10 minutes
ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "jti", "iat", "exp", "iss", "aud"]


class TokenValidationError(Exception):
    """Raised when a token is expired, malformed, unsigned or issued for someone else"""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class JWTManager:
    """
    JWT Token Manager

    Features:
    - HS256 access tokens carrying subject and a unique token id
    - Issuer and audience bound at construction
    - Stateless: no issued-token registry, no refresh tokens
    """

    def __init__(
        self,
        secret_key: bytes,
        issuer: str,
        audience: str,
        access_token_expiry: int = ACCESS_TOKEN_EXPIRY,
    ):
        """
        Initialize JWT Manager

        Args:
            secret_key: Key for signing tokens
            issuer: Token issuer identifier
            audience: Token audience identifier
            access_token_expiry: Access token lifetime in seconds
        """
        if not secret_key:
            raise ValueError("A signing key is required")
        self._secret_key = secret_key
        self.algorithm = ALGORITHM
        self.issuer = issuer
        self.audience = audience
        self.access_token_expiry = access_token_expiry

    def __repr__(self) -> str:
        return f"JWTManager(issuer={self.issuer!r}, audience={self.audience!r})"

    def create_access_token(
        self,
        subject: str,
        now: Optional[datetime] = None,
    ) -> Tuple[str, datetime]:
        """
        Create an access token

        Args:
            subject: Authenticated username (the ``sub`` claim)
            now: Issuance time (defaults to the current UTC time)

        Returns:
            Tuple of (JWT string, expiry timestamp)
        """
        now = now or datetime.now(tz=timezone.utc)
        expires = now + timedelta(seconds=self.access_token_expiry)

        payload = {
            "sub": subject,
            "jti": str(uuid.uuid4()),
            "iat": int(now.timestamp()),
            "exp": int(expires.timestamp()),
            "iss": self.issuer,
            "aud": self.audience,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

        logger.debug(f"Created access token for subject: {subject}, expires: {expires}")
        return token, datetime.fromtimestamp(payload["exp"], tz=timezone.utc)

    def verify_token(self, token: str) -> str:
        """
        Verify a JWT token and return its subject

        Args:
            token: JWT token string

        Returns:
            The ``sub`` claim

        Raises:
            TokenValidationError: On bad signature, wrong issuer or audience,
                missing claims, malformed input or expiry
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                leeway=0,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Token rejected: expired")
            raise TokenValidationError()
        except (jwt.InvalidIssuerError, jwt.InvalidAudienceError):
            logger.debug("Token rejected: issuer or audience mismatch")
            raise TokenValidationError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise TokenValidationError()

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            logger.debug("Token rejected: empty subject")
            raise TokenValidationError()
        return subject
