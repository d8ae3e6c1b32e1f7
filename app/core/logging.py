import logging
import sys

from app.core.config import settings


def setup_logging():
    """Send application logs to stdout at the configured LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger("student_service")

logger = setup_logging()
