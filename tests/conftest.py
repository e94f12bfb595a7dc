"""
Pytest configuration and shared fixtures for order placement tests.

Provides in-memory and scripted repositories plus a clean service container
for every test.
"""
import pytest

from order_placement.application.use_cases.place_order_use_case import PlaceOrderUseCase
from order_placement.domain.entities.order import Order
from order_placement.domain.exceptions import StorageErrorKind
from order_placement.infrastructure.repositories.in_memory_order_repository import InMemoryOrderRepository
from order_placement.infrastructure.service_container import ServiceContainer
from tests.fakes import RecordingOrderRepository


# ── Container ────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_container():
    """Every test starts and ends with an empty service container."""
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


# ── Repositories ─────────────────────────────────────────────────────


@pytest.fixture
def memory_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def recording_repository() -> RecordingOrderRepository:
    return RecordingOrderRepository()


@pytest.fixture
def failing_repository() -> RecordingOrderRepository:
    return RecordingOrderRepository(fail_with=StorageErrorKind.UNAVAILABLE)


# ── Orders ───────────────────────────────────────────────────────────


@pytest.fixture
def pending_order() -> Order:
    return Order(id="A1", items=["widget"])


@pytest.fixture
def empty_order() -> Order:
    return Order(id="A2", items=[])


@pytest.fixture
def use_case(recording_repository) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(order_repository=recording_repository)
