"""
Pytest configuration and fixtures for payment service tests.
"""

import os
import sys

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

# Add app directory to Python path for imports
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(ROOT_DIR)
sys.path.append(os.path.join(ROOT_DIR, "app"))

from models import Base, Payment, PaymentStatus  # noqa: E402
from repository import PaymentRepository  # noqa: E402
from schemas import OrderDto  # noqa: E402


@pytest_asyncio.fixture
async def sessionmaker():
    """In-memory SQLite database with the payments table created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def repository(sessionmaker):
    return PaymentRepository(sessionmaker)


@pytest.fixture
def order_dto():
    return OrderDto(order_id=1, order_desc="Test Order", order_fee=99.99)


@pytest.fixture
def mock_order_client(order_dto):
    """Order client that answers every lookup with the same order."""
    client = AsyncMock()
    client.fetch_order.return_value = order_dto
    return client


@pytest.fixture
def completed_payment():
    return Payment(
        payment_id=1,
        order_id=1,
        is_payed=True,
        payment_status=PaymentStatus.COMPLETED,
    )


# Configure pytest-asyncio
def pytest_configure(config):
    """Configure pytest with asyncio support."""
    config.addinivalue_line("markers", "asyncio: mark test as async")


# Test collection configuration
def pytest_collection_modifyitems(config, items):
    """Add asyncio marker to async test functions."""
    for item in items:
        if "asyncio" in item.keywords:
            item.add_marker(pytest.mark.asyncio)
