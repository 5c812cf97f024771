"""
Structured logging configuration using loguru.
"""
import sys
from loguru import logger
from wedding_api.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default handler with the app's sinks."""
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="DEBUG" if settings.ENVIRONMENT == "development" else "INFO",
        colorize=True,
    )

    if settings.ENVIRONMENT == "production":
        logger.add(
            "logs/wedding-api.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="INFO",
        )


__all__ = ["logger", "configure_logging"]
