"""In-memory order repository implementation."""
import logging
from threading import Lock
from typing import Dict, Optional

from order_placement.domain.entities.order import Order
from order_placement.domain.exceptions import StorageError, StorageErrorKind
from order_placement.domain.interfaces.order_repository import IOrderRepository


class InMemoryOrderRepository(IOrderRepository):
    """
    In-memory order storage.

    Follows Repository Pattern. Orders are kept in a dict keyed by id and
    live as long as the repository instance. Safe to share between threads.
    """

    def __init__(self):
        """Initialize repository with empty storage."""
        self._orders: Dict[str, Order] = {}
        self._lock = Lock()
        self._logger = logging.getLogger(__name__)

    def save(self, order: Order) -> None:
        """
        Store an order.

        Args:
            order: Order to store

        Raises:
            StorageError: CONFLICT if an order with the same id is already stored,
                INVALID if the value is not an Order
        """
        if not isinstance(order, Order):
            raise StorageError(
                StorageErrorKind.INVALID,
                f"Expected Order, got {type(order).__name__}"
            )

        with self._lock:
            if order.id in self._orders:
                self._logger.warning(f"Order {order.id} already stored")
                raise StorageError(
                    StorageErrorKind.CONFLICT,
                    f"Order {order.id} already exists",
                    order_id=order.id
                )
            self._orders[order.id] = order

        self._logger.debug(f"Order {order.id} stored")

    def get(self, order_id: str) -> Optional[Order]:
        """Return the stored order with the given id, or None."""
        with self._lock:
            return self._orders.get(order_id)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def clear(self) -> None:
        """Remove all stored orders."""
        with self._lock:
            self._orders.clear()
