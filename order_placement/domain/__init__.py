"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities
- Repository interfaces
- Domain errors

Nothing in here imports from the application or infrastructure layers.
"""
