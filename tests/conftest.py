"""
Shared pytest fixtures for the reporting examples tests.

This module provides common fixtures used across all test files, including:
- Fresh user stores with no simulated latency
- Seeded stores with a few known users
- A FastAPI test client bound to a fresh service container
- Sample records for the data-processing utilities
"""

import random
from typing import Any, Dict, List
from unittest.mock import Mock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from reporting_examples.core.calculator import Calculator
from reporting_examples.core.user_service import UserService


# ============================================================================
# Core Service Fixtures
# ============================================================================

@pytest.fixture
def user_service() -> UserService:
    """Empty user store without simulated latency."""
    return UserService(latency_ms=0)


@pytest_asyncio.fixture
async def seeded_service(user_service: UserService) -> UserService:
    """User store holding three users: two adults and one minor."""
    await user_service.create_user("John Doe", "john@example.com", 30)
    await user_service.create_user("Jane Smith", "jane@example.com", 25)
    await user_service.create_user("Bobby Young", "bobby@sample.org", 16)
    return user_service


@pytest.fixture
def calculator() -> Calculator:
    return Calculator()


@pytest.fixture
def fixed_rng():
    """Random source whose draws are controlled by the test."""
    rng = Mock(spec=random.Random)
    rng.random.return_value = 0.5
    return rng


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def client():
    """Test client with a fresh, latency-free service container."""
    from reporting_examples.api.app import app
    from reporting_examples.api.routes import services

    services.initialize(latency_ms=0)
    yield TestClient(app)
    services.cleanup()


@pytest.fixture
def new_user_payload() -> Dict[str, Any]:
    return {"name": "John Doe", "email": "john@example.com", "age": 30}


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Records for sorting and grouping."""
    return [
        {"name": "Charlie", "category": "A", "value": 3},
        {"name": "Alice", "category": "B", "value": 1},
        {"name": "Bob", "category": "A", "value": 2},
        {"name": "Dana", "category": "B", "value": 2},
    ]


@pytest.fixture
def person_schema() -> Dict[str, Dict[str, Any]]:
    return {
        "name": {"type": "string", "required": True},
        "age": {"type": "number", "required": True},
    }


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end workflows across the HTTP API"
    )
    config.addinivalue_line(
        "markers", "flaky: tests whose outcome depends on randomness"
    )
