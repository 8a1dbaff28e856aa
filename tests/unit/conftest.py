"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── core/            Config, token manager
    ├── auth_service/    Credential check
    └── vault_service/   Encryption engine, models, in-memory store

Usage:
    pytest tests/unit -v                 # All unit tests
    pytest tests/unit -m unit -v         # By marker
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
