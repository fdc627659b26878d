"""
Ten Thousand Configuration.

Environment variables, settings, and logging configuration.
"""

from ten_thousand.config.logging import configure_logging
from ten_thousand.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
