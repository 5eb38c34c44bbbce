"""Logging configuration."""

import logging
import sys
from typing import Optional

from bankstore.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"

# Driver loggers that are chatty at INFO
QUIET_LOGGERS = (
    "sqlalchemy.engine",
    "azure",
    "azure.core.pipeline.policies.http_logging_policy",
)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure bankstore logging; ``level`` overrides the configured log level."""
    level_name = (level or get_settings().log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
