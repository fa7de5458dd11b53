"""Core lookup package: pure functions, no I/O.

Re-exports key symbols for convenience.
"""

from skillslots.core.paths import MISSING, find_first, get_or, has_path
from skillslots.core.protocols import RequestTypeClassifier
from skillslots.core.slots import (
    get_intent_name,
    get_request_type,
    get_slot_names,
    get_slot_value_id,
    get_slot_values_from_match,
)
from skillslots.core.types import SlotResolution, SlotValue

__all__ = [
    "MISSING",
    "RequestTypeClassifier",
    "SlotResolution",
    "SlotValue",
    "find_first",
    "get_intent_name",
    "get_or",
    "get_request_type",
    "get_slot_names",
    "get_slot_value_id",
    "get_slot_values_from_match",
    "has_path",
]
