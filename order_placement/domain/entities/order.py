"""Order domain entity."""
import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Tuple


class OrderStatus(str, Enum):
    """Lifecycle states of an order."""

    PENDING = "pending"
    PLACED = "placed"
    FAILED = "failed"


def new_order_id() -> str:
    """Generate an opaque order identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Order:
    """
    Domain entity representing an order.

    Orders are values: status changes return a new Order and leave
    the original untouched. The status moves out of PENDING exactly once.
    """

    id: str
    items: Tuple[Any, ...] = ()
    status: OrderStatus = OrderStatus.PENDING

    def __post_init__(self):
        """Validate order entity."""
        if not self.id:
            raise ValueError("id is required")
        if isinstance(self.items, (str, bytes)):
            raise ValueError("items must be a sequence of line items, not a string")
        # frozen dataclass, so normalise through object.__setattr__
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "status", OrderStatus(self.status))

    @property
    def is_pending(self) -> bool:
        return self.status is OrderStatus.PENDING

    def mark_placed(self) -> "Order":
        """Return a copy of this order with status PLACED."""
        return self._transition(OrderStatus.PLACED)

    def mark_failed(self) -> "Order":
        """Return a copy of this order with status FAILED."""
        return self._transition(OrderStatus.FAILED)

    def _transition(self, status: OrderStatus) -> "Order":
        if not self.is_pending:
            raise ValueError(
                f"Order {self.id} is {self.status.value}; "
                f"cannot move to {status.value}"
            )
        return replace(self, status=status)
