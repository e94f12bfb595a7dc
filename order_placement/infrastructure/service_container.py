"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from order_placement.application.use_cases.place_order_use_case import PlaceOrderUseCase
from order_placement.config.settings import Config
from order_placement.domain.interfaces.order_repository import IOrderRepository
from order_placement.infrastructure.factories.repository_factory import RepositoryFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern and Dependency Inversion Principle.
    Concrete adapters are chosen here, from configuration, and handed
    to use cases through their constructors.
    """

    _instance: Optional['ServiceContainer'] = None
    _config: type[Config] = Config
    _order_repository: Optional[IOrderRepository] = None
    _place_order_use_case: Optional[PlaceOrderUseCase] = None

    def __new__(cls, config_class: Optional[type[Config]] = None):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_class: Optional[type[Config]] = None):
        """
        Initialize service container.

        Args:
            config_class: Optional configuration class (keeps the current one if omitted).
                Switching to a different class drops services built from the old one.
        """
        self._logger = logging.getLogger(__name__)
        if config_class is not None and config_class is not ServiceContainer._config:
            if ServiceContainer._order_repository is not None:
                self._logger.info(
                    f"Configuration changed to {config_class.__name__}; rebuilding services"
                )
            ServiceContainer._config = config_class
            ServiceContainer._order_repository = None
            ServiceContainer._place_order_use_case = None

    @property
    def config(self) -> type[Config]:
        return self._config

    def get_order_repository(self) -> IOrderRepository:
        """Get or create order repository instance."""
        if self._order_repository is None:
            storage_type = self._config.ORDER_STORAGE_TYPE
            try:
                ServiceContainer._order_repository = RepositoryFactory.create_order_repository(storage_type)
                self._logger.info(f"OrderRepository created with {storage_type}")
            except Exception as e:
                self._logger.error(f"Failed to create OrderRepository: {e}")
                raise
        return self._order_repository

    def get_place_order_use_case(self) -> PlaceOrderUseCase:
        """Get or create place order use case instance."""
        if self._place_order_use_case is None:
            order_repository = self.get_order_repository()
            ServiceContainer._place_order_use_case = PlaceOrderUseCase(
                order_repository=order_repository
            )
            self._logger.info("PlaceOrderUseCase created")
        return self._place_order_use_case

    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._config = Config
        cls._order_repository = None
        cls._place_order_use_case = None
