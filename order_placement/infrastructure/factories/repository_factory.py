"""Factory for creating repository instances (Factory Pattern)."""
import logging

from order_placement.domain.interfaces.order_repository import IOrderRepository
from order_placement.infrastructure.repositories.in_memory_order_repository import InMemoryOrderRepository


logger = logging.getLogger(__name__)


class RepositoryFactory:
    """
    Factory for creating repository instances following Factory Pattern.

    Centralizes storage selection so use cases never name a concrete backend.
    """

    @staticmethod
    def create_order_repository(storage_type: str = "memory") -> IOrderRepository:
        """
        Create an order repository instance.

        Args:
            storage_type: Type of storage ("memory")

        Returns:
            IOrderRepository instance

        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = storage_type.lower()

        if storage_type == "memory":
            logger.debug("Creating in-memory order repository")
            return InMemoryOrderRepository()
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")
