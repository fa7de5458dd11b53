"""Logging setup for skillslots.

The library only ever logs through LOGGER; handlers are attached by the
CLI (or by the embedding skill) and never at import time.
"""

import logging
import os

LOGGER = logging.getLogger("skillslots")


def log_level_from_env(default: str = "INFO") -> str:
    """Return the upper-cased ``LOG_LEVEL`` environment value."""
    return (os.environ.get("LOG_LEVEL", "") or default).upper()
