"""
Common/Shared Fixtures

Base factories and generators used across multiple services.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional


def make_secret_id() -> str:
    """Generate a unique secret ID"""
    return str(uuid.uuid4())


def make_secret_name(prefix: Optional[str] = None) -> str:
    """Generate a unique secret name"""
    return f"{prefix or 'secret'}_{uuid.uuid4().hex[:8]}"


def make_secret_value() -> str:
    """Generate a mock secret value"""
    return f"sk_test_{uuid.uuid4().hex[:16]}"


def make_timestamp() -> datetime:
    """Generate current UTC timestamp"""
    return datetime.now(timezone.utc)
