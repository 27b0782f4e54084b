"""
Description:
Configures the loguru sink used across the service.

Dependencies:
- loguru: For structured, leveled logging.
- virtual_panel.core.config: For the configured log level.
"""
import sys
from typing import Optional

from loguru import logger

from virtual_panel.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with one that honours LOG_LEVEL."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or settings.log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
        backtrace=settings.is_development,
        diagnose=settings.is_development,
    )
