"""
SkinTone Styler Logging
Configures the loguru sink once and hands out request-scoped loggers.
"""
import sys
from typing import Optional

from loguru import logger

from app.config import config

NO_REQUEST = "-"

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[request_id]} | {message} | {extra}"
)

_configured = False


def configure_logging() -> None:
    """Replace loguru's default handler with the service's stdout sink (idempotent)."""
    global _configured
    if _configured:
        return

    logger.remove()
    # Log lines outside a request still render the request_id column
    logger.configure(extra={"request_id": NO_REQUEST})
    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=config.LOG_LEVEL,
        serialize=config.LOG_SERIALIZE
    )
    _configured = True


def get_logger(request_id: Optional[str] = None):
    """
    Get the service logger.

    Args:
        request_id: Request id to bind to every line logged through the result

    Returns:
        loguru logger, bound to request_id when one is given
    """
    configure_logging()
    if request_id is None:
        return logger
    return logger.bind(request_id=request_id)
