"""
Authentication Service Unit Tests

Login issues a token only for the configured credentials; verification
delegates to the token manager.

Usage:
    pytest tests/unit/auth_service -v
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from core.jwt_manager import TokenValidationError
from microservices.auth_service.auth_service import AuthenticationService
from microservices.auth_service.models import TokenResponse
from microservices.auth_service.protocols import AuthenticationError, TokenManagerProtocol
from tests.fixtures import DEMO_PASSWORD, DEMO_USERNAME, make_password_hash

pytestmark = [pytest.mark.unit]


@pytest.fixture
def auth_service(jwt_manager):
    return AuthenticationService(
        token_manager=jwt_manager,
        username=DEMO_USERNAME,
        password_hash=make_password_hash(),
    )


@pytest.fixture
def mock_token_manager():
    manager = MagicMock(spec=["create_access_token", "verify_token"])
    manager.create_access_token.return_value = (
        "signed.token.value",
        datetime(2024, 1, 1, 12, 10, tzinfo=timezone.utc),
    )
    return manager


class TestLogin:

    def test_issues_token_for_valid_credentials(self, auth_service, jwt_manager):
        result = auth_service.login(DEMO_USERNAME, DEMO_PASSWORD)

        assert isinstance(result, TokenResponse)
        assert result.token
        assert jwt_manager.verify_token(result.token) == DEMO_USERNAME

    def test_wrong_password_raises(self, auth_service):
        with pytest.raises(AuthenticationError):
            auth_service.login(DEMO_USERNAME, "wrong-password")

    def test_wrong_username_raises(self, auth_service):
        with pytest.raises(AuthenticationError):
            auth_service.login("someone-else", DEMO_PASSWORD)

    def test_no_token_issued_on_failure(self, mock_token_manager):
        service = AuthenticationService(mock_token_manager, DEMO_USERNAME, make_password_hash())

        with pytest.raises(AuthenticationError):
            service.login(DEMO_USERNAME, "wrong-password")

        mock_token_manager.create_access_token.assert_not_called()

    def test_token_subject_is_username(self, mock_token_manager):
        service = AuthenticationService(mock_token_manager, DEMO_USERNAME, make_password_hash())

        result = service.login(DEMO_USERNAME, DEMO_PASSWORD)

        mock_token_manager.create_access_token.assert_called_once_with(DEMO_USERNAME)
        assert result.token == "signed.token.value"
        assert result.expires == datetime(2024, 1, 1, 12, 10, tzinfo=timezone.utc)


class TestVerifyToken:

    def test_returns_subject(self, auth_service, jwt_manager):
        token, _ = jwt_manager.create_access_token(DEMO_USERNAME)
        assert auth_service.verify_token(token) == DEMO_USERNAME

    def test_propagates_validation_error(self, auth_service):
        with pytest.raises(TokenValidationError):
            auth_service.verify_token("garbage")


class TestTokenManagerProtocol:

    def test_jwt_manager_implements_protocol(self, jwt_manager):
        assert isinstance(jwt_manager, TokenManagerProtocol)
