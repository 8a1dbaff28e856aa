"""
Component Test Layer Configuration

Structure:
    tests/component/
    └── vault_service/   VaultService with mocks, HTTP surface via TestClient

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest
from fastapi.testclient import TestClient

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from microservices.vault_service.main import create_app
from microservices.vault_service.vault_repository import InMemoryVaultRepository


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def memory_repository() -> InMemoryVaultRepository:
    """Fresh in-memory secret store"""
    return InMemoryVaultRepository()


@pytest.fixture
def app(vault_config, memory_repository):
    """Application wired with test config and the in-memory store"""
    return create_app(config=vault_config, repository=memory_repository)


@pytest.fixture
def client(app):
    """TestClient with lifespan (startup/shutdown) run"""
    with TestClient(app) as test_client:
        yield test_client
