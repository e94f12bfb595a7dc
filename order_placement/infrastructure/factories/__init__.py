"""Factories for creating infrastructure components."""
from order_placement.infrastructure.factories.repository_factory import RepositoryFactory

__all__ = [
    "RepositoryFactory",
]
