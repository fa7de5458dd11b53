"""Application-level configuration for the skillslots CLI."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from skillslots.core.constants import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)

_log = logging.getLogger("skillslots")


@dataclass(frozen=True, slots=True)
class SkillSlotsConfig:
    """Top-level configuration loaded from ~/.config/skillslots/config.json."""

    slots: tuple[str, ...] = ()
    output: str = DEFAULT_OUTPUT_FORMAT


def config_path(path: str | None = None) -> Path:
    """Resolve the config file location.

    An explicit *path* wins, then ``$SKILLSLOTS_CONFIG_DIR/config.json``,
    then ``~/.config/skillslots/config.json``.
    """
    if path:
        return Path(path).expanduser()
    config_dir = Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()
    return config_dir / DEFAULT_CONFIG_FILE


def load_config(path: str | None = None) -> SkillSlotsConfig:
    """Load skillslots configuration from a JSON file.

    The file supports two optional keys::

        {
          "slots": ["city", "date"],
          "output": "json"
        }

    Returns a default config if the file does not exist or its top level
    is not an object.
    """
    cfg_path = config_path(path)
    if not cfg_path.exists():
        return SkillSlotsConfig()

    with open(cfg_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        return SkillSlotsConfig()

    raw_slots = data.get("slots", [])
    if isinstance(raw_slots, str):
        raw_slots = [raw_slots]
    slots = tuple(str(s) for s in raw_slots if s) if isinstance(raw_slots, list) else ()

    output = data.get("output", DEFAULT_OUTPUT_FORMAT)
    if output not in OUTPUT_FORMATS:
        _log.debug(
            "Unknown output format %r in %s; using %r",
            output,
            cfg_path,
            DEFAULT_OUTPUT_FORMAT,
        )
        output = DEFAULT_OUTPUT_FORMAT

    return SkillSlotsConfig(slots=slots, output=output)
