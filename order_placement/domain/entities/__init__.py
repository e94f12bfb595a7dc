"""Domain entities - core business objects."""
from order_placement.domain.entities.order import Order, OrderStatus, new_order_id

__all__ = [
    "Order",
    "OrderStatus",
    "new_order_id",
]
