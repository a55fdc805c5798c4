"""Process-wide logging setup for the netgauge exporter."""

import logging
import os
import sys

LOG_LEVEL_ENV = "NETGAUGE_LOG_LEVEL"

# Cycles run on pool threads; the thread name tells the two loops apart.
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level_name: str | None = None) -> None:
    """Configure the root logger to write to stderr.

    Args:
        level_name: Level to use; defaults to NETGAUGE_LOG_LEVEL, then INFO.
            An unknown name falls back to INFO with a warning.

    Examples:
        # Per-cycle parse details
        $ NETGAUGE_LOG_LEVEL=DEBUG TARGET_IP=10.0.0.2 python -m netgauge
    """
    if level_name is None:
        level_name = os.environ.get(LOG_LEVEL_ENV, "INFO")
    requested = level_name.strip().upper()
    log_level = _LEVELS.get(requested, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Replace handlers installed before configuration
    )

    logger = logging.getLogger(__name__)
    if requested not in _LEVELS:
        logger.warning(
            "Unknown log level %r in %s; using INFO (choices: %s)",
            level_name,
            LOG_LEVEL_ENV,
            ", ".join(_LEVELS),
        )
    logger.info("Logging configured: level=%s", logging.getLevelName(log_level))
