"""Test doubles for the order repository interface."""
from typing import List, Optional

from order_placement.domain.entities.order import Order
from order_placement.domain.exceptions import StorageError, StorageErrorKind
from order_placement.domain.interfaces.order_repository import IOrderRepository


class RecordingOrderRepository(IOrderRepository):
    """Repository that records every save and optionally fails with a fixed kind."""

    def __init__(self, fail_with: Optional[StorageErrorKind] = None):
        self.fail_with = fail_with
        self.saved: List[Order] = []

    @property
    def calls(self) -> int:
        return len(self.saved)

    def save(self, order: Order) -> None:
        self.saved.append(order)
        if self.fail_with is not None:
            raise StorageError(self.fail_with, "scripted failure", order_id=order.id)
