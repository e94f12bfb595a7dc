"""Use case for placing an order (Use Case Pattern)."""
import logging
from dataclasses import dataclass
from typing import Optional

from order_placement.domain.entities.order import Order
from order_placement.domain.exceptions import (
    InvalidOrder,
    PersistenceFailed,
    PlaceOrderError,
    StorageError,
    StorageErrorKind,
)
from order_placement.domain.interfaces.order_repository import IOrderRepository


logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderResult:
    """Outcome of placing an order."""
    order: Order
    success: bool
    error: Optional[PlaceOrderError] = None

    @property
    def error_kind(self) -> Optional[StorageErrorKind]:
        """Storage error kind when placement failed in the repository."""
        if isinstance(self.error, PersistenceFailed):
            return self.error.kind
        return None

    def unwrap(self) -> Order:
        """Return the placed order, or raise the error that prevented it."""
        if self.error is not None:
            # drop the traceback left by any earlier unwrap() of this result
            raise self.error.with_traceback(None)
        return self.order


class PlaceOrderUseCase:
    """
    Use case for placing an order.

    Depends only on the IOrderRepository capability. The concrete
    repository is injected by the caller, so storage can be swapped
    without touching this class.
    """

    def __init__(self, order_repository: IOrderRepository):
        """
        Initialize use case with dependencies (Dependency Injection).

        Args:
            order_repository: Repository used to persist placed orders

        Raises:
            TypeError: If order_repository does not implement IOrderRepository
        """
        if not isinstance(order_repository, IOrderRepository):
            raise TypeError("order_repository must implement IOrderRepository")
        self.order_repository = order_repository

    def execute(self, order: Order) -> PlaceOrderResult:
        """
        Execute the use case - validate and persist an order.

        The repository is called exactly once for a valid order and never
        for an invalid one. The given order is not modified; the result
        carries a copy with the new status.

        Args:
            order: Pending order with at least one item

        Returns:
            PlaceOrderResult with status PLACED on success, FAILED with a
            PersistenceFailed error on storage failure, or the unchanged
            order with an InvalidOrder error when preconditions fail
        """
        reason = self._check_preconditions(order)
        if reason:
            logger.warning(f"Rejected order {order.id}: {reason}")
            return PlaceOrderResult(
                order=order,
                success=False,
                error=InvalidOrder(order.id, reason)
            )

        try:
            self.order_repository.save(order)
        except StorageError as e:
            logger.error(
                f"Failed to persist order {order.id} ({e.kind.value}): {e}"
            )
            return PlaceOrderResult(
                order=order.mark_failed(),
                success=False,
                error=PersistenceFailed(e, order_id=order.id)
            )

        logger.info(f"Order {order.id} placed with {len(order.items)} item(s)")
        return PlaceOrderResult(order=order.mark_placed(), success=True)

    @staticmethod
    def _check_preconditions(order: Order) -> Optional[str]:
        """Return the reason an order cannot be placed, or None."""
        if not order.is_pending:
            return f"status is {order.status.value}, expected pending"
        if not order.items:
            return "order has no items"
        return None
