"""Interface for order repository (Repository Pattern)."""
from abc import ABC, abstractmethod

from order_placement.domain.entities.order import Order


class IOrderRepository(ABC):
    """
    Interface for order storage following Repository Pattern.

    Use cases depend on this contract only. Storage backends implement it
    and are injected at construction time.
    """

    @abstractmethod
    def save(self, order: Order) -> None:
        """
        Persist an order.

        Implementations attempt the write exactly once per call, never
        retry on their own and never modify the order they are given.

        Args:
            order: Order to store

        Raises:
            StorageError: If the order could not be stored
                (UNAVAILABLE, CONFLICT or INVALID)
        """
        pass
