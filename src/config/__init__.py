"""
Yahtzee Configuration.

Environment variables, settings, logging configuration and static texts.
"""

from src.config.about import RULES_TEXT, VERSION, VERSION_INFO
from src.config.logging_setup import configure_logging
from src.config.settings import Settings, get_settings

__all__ = [
    "RULES_TEXT",
    "Settings",
    "VERSION",
    "VERSION_INFO",
    "configure_logging",
    "get_settings",
]
