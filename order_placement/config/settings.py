"""Application configuration with environment-based settings."""
import os
import logging
from dotenv import load_dotenv


SUPPORTED_STORAGE_TYPES = ("memory",)


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Storage
    ORDER_STORAGE_TYPE: str = os.getenv("ORDER_STORAGE_TYPE", "memory").lower()

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if cls.ORDER_STORAGE_TYPE not in SUPPORTED_STORAGE_TYPES:
            raise ValueError(
                f"Unsupported ORDER_STORAGE_TYPE: {cls.ORDER_STORAGE_TYPE}. "
                f"Expected one of: {', '.join(SUPPORTED_STORAGE_TYPES)}"
            )
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown LOG_LEVEL: {cls.LOG_LEVEL}")

    @classmethod
    def log_level(cls) -> int:
        """Resolve the numeric logging level for this configuration."""
        if cls.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(cls.LOG_LEVEL)
        # unknown names come back as "Level X"; validate() reports those
        return level if isinstance(level, int) else logging.INFO


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    ORDER_STORAGE_TYPE = "memory"


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("ORDER_PLACEMENT_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
