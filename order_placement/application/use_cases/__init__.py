"""Application use cases."""
from order_placement.application.use_cases.place_order_use_case import (
    PlaceOrderUseCase,
    PlaceOrderResult
)

__all__ = [
    "PlaceOrderUseCase",
    "PlaceOrderResult",
]
