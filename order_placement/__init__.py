"""Order placement reference with dependency injection.

The package is laid out in layers: ``domain`` (entities, interfaces, errors),
``application`` (use cases) and ``infrastructure`` (adapters and wiring).
``create_container`` is the entry point that wires them together.
"""
import logging
import sys
from typing import Optional

from order_placement.config.settings import Config, get_config
from order_placement.infrastructure.service_container import ServiceContainer


__version__ = "0.1.0"


def create_container(config_class: Optional[type[Config]] = None) -> ServiceContainer:
    """
    Create and configure the service container.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured ServiceContainer

    Raises:
        ValueError: If the configuration is invalid
    """
    _logger = logging.getLogger(__name__)

    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    configure_logging(config)

    try:
        config.validate()
    except ValueError as e:
        _logger.critical(f"Invalid configuration: {e}")
        raise

    container = ServiceContainer(config_class=config)
    _logger.info(f"Service container ready ({config.__name__}, storage={config.ORDER_STORAGE_TYPE})")
    return container


def configure_logging(config: type[Config] = Config) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True  # Override any existing configuration
    )
