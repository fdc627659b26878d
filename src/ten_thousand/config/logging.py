"""
Ten Thousand - Logging Configuration

Engine modules log through `logging.getLogger(__name__)`; this sets up the
root handler once for whichever application embeds the engine.
"""

import logging

from ten_thousand.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings | None = None) -> int:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read (default: cached environment settings)

    Returns:
        The numeric level that was applied
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
    return level
