"""Domain errors for order storage and placement."""
from enum import Enum
from typing import Optional


class StorageErrorKind(str, Enum):
    """Reasons a repository can refuse to store an order."""

    UNAVAILABLE = "unavailable"
    CONFLICT = "conflict"
    INVALID = "invalid"


class StorageError(Exception):
    """
    Raised by repository adapters when an order cannot be persisted.

    Args:
        kind: Failure category reported by the adapter
        message: Human readable detail
        order_id: Identifier of the order being stored, if known
    """

    def __init__(self, kind: StorageErrorKind, message: str = "", order_id: Optional[str] = None):
        self.kind = StorageErrorKind(kind)
        self.order_id = order_id
        self.message = message or f"Storage {self.kind.value}"
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"StorageError(kind={self.kind.value!r}, order_id={self.order_id!r})"


class PlaceOrderError(Exception):
    """Base class for failures reported by the place order use case."""

    def __init__(self, message: str, order_id: Optional[str] = None):
        self.order_id = order_id
        super().__init__(message)


class InvalidOrder(PlaceOrderError):
    """The order does not satisfy the placement preconditions."""

    def __init__(self, order_id: Optional[str], reason: str):
        self.reason = reason
        super().__init__(f"Invalid order {order_id}: {reason}", order_id=order_id)


class PersistenceFailed(PlaceOrderError):
    """The repository refused the order. Wraps the underlying StorageError."""

    def __init__(self, cause: StorageError, order_id: Optional[str] = None):
        self.cause = cause
        self.__cause__ = cause
        order_id = order_id or cause.order_id
        super().__init__(
            f"Failed to persist order {order_id}: {cause.message}",
            order_id=order_id
        )

    @property
    def kind(self) -> StorageErrorKind:
        return self.cause.kind
