"""Public API for skillslots.

Wraps the pure lookups in :mod:`skillslots.core` with envelope loading and
per-slot summaries.

Typical usage::

    from skillslots.api import load_envelope, resolve_slot

    envelope = load_envelope("request.json")
    result = resolve_slot(envelope, "city")
    print(result.value_id)
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from skillslots.core.env import LOGGER
from skillslots.core.protocols import RequestTypeClassifier
from skillslots.core.slots import (
    get_request_type,
    get_slot_names,
    get_slot_value_id,
    get_slot_values_from_match,
)
from skillslots.core.types import SlotResolution, SlotValue


class EnvelopeError(Exception):
    """Raised when a request envelope cannot be read or decoded."""


def load_envelope(source: str | Path) -> dict[str, Any]:
    """Read a JSON request envelope from a file, or stdin for ``"-"``.

    Raises:
        EnvelopeError: If the input cannot be read, is not valid JSON,
            or is not a JSON object.
    """
    try:
        if str(source) == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(source).expanduser().read_text(encoding="utf-8")
    except OSError as e:
        raise EnvelopeError(f"Cannot read envelope {source}: {e}") from e

    if not raw.strip():
        raise EnvelopeError(f"Empty envelope: {source}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise EnvelopeError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(data, dict):
        raise EnvelopeError("Request envelope must be a JSON object")
    return data


def resolve_slot(
    envelope: Any,
    slot_name: str,
    *,
    classify: RequestTypeClassifier = get_request_type,
) -> SlotResolution:
    """Summarize the first matching resolution of *slot_name*."""
    records = get_slot_values_from_match(envelope, slot_name, classify=classify)
    if not isinstance(records, (list, tuple)):
        records = ()
    value_id = get_slot_value_id(envelope, slot_name, classify=classify)
    return SlotResolution(
        slot_name=slot_name,
        values=tuple(SlotValue.from_record(r) for r in records),
        value_id=str(value_id) if value_id is not None else None,
    )


def resolve_slots(
    envelope: Any,
    slot_names: Iterable[str] | None = None,
    *,
    classify: RequestTypeClassifier = get_request_type,
) -> list[SlotResolution]:
    """Resolve each named slot, or every slot on the intent if none given."""
    names = list(slot_names or ()) or get_slot_names(envelope)
    LOGGER.debug("Resolving slots: %s", ", ".join(names) or "(none)")
    return [resolve_slot(envelope, name, classify=classify) for name in names]
