import logging
import sys
from typing import Optional

from ..config import settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """Setup application logging configuration."""

    if log_level is None:
        log_level = "DEBUG" if settings.debug else "INFO"
    level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("mortgage_quotes").setLevel(level)

    # Suppress noisy third-party loggers
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.info(f"Logging setup complete - Level: {log_level}")
