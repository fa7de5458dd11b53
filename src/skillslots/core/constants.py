"""Default configuration values and platform literals for skillslots."""

from typing import Final

INTENT_REQUEST: Final = "IntentRequest"
ER_SUCCESS_MATCH: Final = "ER_SUCCESS_MATCH"

REQUEST_TYPE_PATH: Final = ("request", "type")
INTENT_NAME_PATH: Final = ("request", "intent", "name")
SLOTS_PATH: Final = ("request", "intent", "slots")
RESOLUTIONS_SUBPATH: Final = ("resolutions", "resolutionsPerAuthority")
STATUS_CODE_PATH: Final = ("status", "code")

# CLI / config
DEFAULT_CONFIG_DIR: Final = "~/.config/skillslots"
DEFAULT_CONFIG_DIR_ENV: Final = "SKILLSLOTS_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"
DEFAULT_OUTPUT_FORMAT: Final = "table"
OUTPUT_FORMATS: Final = ("table", "json")
