"""
Purpose:
- Configure the loguru sink once per process.
"""

import sys
from loguru import logger
from .settings import settings

def setup_logging(level: str | None = None) -> None:
    """Replace loguru's default handler with a stderr sink at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.log_level).upper(),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
    )
