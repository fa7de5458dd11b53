"""Slot value extraction from intent request envelopes.

Resolution authorities are scanned in order and the first one reporting
``ER_SUCCESS_MATCH`` wins. Nothing here raises on a malformed envelope:
every "not found" case comes back as ``[]`` or ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from skillslots.core.constants import (
    ER_SUCCESS_MATCH,
    INTENT_NAME_PATH,
    INTENT_REQUEST,
    REQUEST_TYPE_PATH,
    RESOLUTIONS_SUBPATH,
    SLOTS_PATH,
    STATUS_CODE_PATH,
)
from skillslots.core.env import LOGGER
from skillslots.core.paths import find_first, get_or, is_sequence
from skillslots.core.protocols import RequestTypeClassifier


def get_request_type(envelope: Any) -> str | None:
    """Default classifier: the envelope's ``request.type``."""
    request_type = get_or(envelope, REQUEST_TYPE_PATH)
    return request_type if isinstance(request_type, str) else None


def get_intent_name(envelope: Any) -> str | None:
    """The envelope's ``request.intent.name``, or None."""
    intent_name = get_or(envelope, INTENT_NAME_PATH)
    return intent_name if isinstance(intent_name, str) else None


def get_slot_names(envelope: Any) -> list[str]:
    """Names of the slots present on the intent, in envelope order."""
    slots = get_or(envelope, SLOTS_PATH)
    if not isinstance(slots, Mapping):
        return []
    return [name for name in slots if isinstance(name, str)]


def _is_match(authority: Any, _index: int, _authorities: Sequence[Any]) -> bool:
    return get_or(authority, STATUS_CODE_PATH) == ER_SUCCESS_MATCH


def get_slot_values_from_match(
    envelope: Any,
    slot_name: str,
    *,
    classify: RequestTypeClassifier = get_request_type,
) -> Any:
    """Return the ``values`` of the first authority that matched *slot_name*.

    The values are returned as found in the envelope (not copied), empty
    lists included. Returns ``[]`` for non-intent requests, missing
    resolutions, no matching authority, or a matching authority whose
    values are absent, None, or a falsy scalar.
    """
    request_type = classify(envelope)
    if request_type != INTENT_REQUEST:
        LOGGER.debug("Not an intent request (%s); no slot values", request_type)
        return []

    resolutions = get_or(envelope, (*SLOTS_PATH, slot_name, *RESOLUTIONS_SUBPATH))
    if not resolutions or not is_sequence(resolutions):
        LOGGER.debug("Slot %r has no resolutions", slot_name)
        return []

    authority = find_first(resolutions, _is_match)
    if authority is None:
        LOGGER.debug("No authority matched slot %r", slot_name)
        return []

    values = get_or(authority, ("values",))
    if values is None or (isinstance(values, (str, int, float)) and not values):
        LOGGER.debug("Matching authority for slot %r has no values", slot_name)
        return []
    return values


def get_slot_value_id(
    envelope: Any,
    slot_name: str,
    *,
    classify: RequestTypeClassifier = get_request_type,
) -> str | None:
    """Id of the first matched value for *slot_name*, or None."""
    values = get_slot_values_from_match(envelope, slot_name, classify=classify)
    return get_or(values, (0, "id"), None)
