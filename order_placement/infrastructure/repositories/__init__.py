"""Repository implementations (Infrastructure Layer).

These implement domain interfaces defined in order_placement.domain.interfaces.
"""
from order_placement.infrastructure.repositories.in_memory_order_repository import InMemoryOrderRepository

__all__ = [
    "InMemoryOrderRepository",
]
