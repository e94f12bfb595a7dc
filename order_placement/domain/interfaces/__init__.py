"""Domain interfaces following Dependency Inversion Principle."""

from order_placement.domain.interfaces.order_repository import IOrderRepository

__all__ = [
    "IOrderRepository",
]
