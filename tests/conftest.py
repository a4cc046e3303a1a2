"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payment_gateway.domain.value_objects import Amount, Order, OrderItem
from payment_gateway.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def amount() -> Amount:
    """One euro."""
    return Amount(Decimal("1.00"), "EUR")


@pytest.fixture
def order() -> Order:
    """An order with a single item."""
    return Order.of(OrderItem("1", 1))
