"""Core data types shared across skillslots modules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SlotValue:
    """Immutable canonical value resolved for a slot."""

    id: str = ""
    name: str = ""

    @classmethod
    def from_record(cls, record: Any) -> SlotValue:
        """Build from a ``{"id": ..., "name": ...}`` record.

        Missing or non-string fields become empty strings.
        """
        if not isinstance(record, Mapping):
            return cls()
        raw_id = record.get("id")
        raw_name = record.get("name")
        return cls(
            id=raw_id if isinstance(raw_id, str) else "",
            name=raw_name if isinstance(raw_name, str) else "",
        )


@dataclass(frozen=True, slots=True)
class SlotResolution:
    """Immutable summary of one slot's first matching resolution."""

    slot_name: str
    values: tuple[SlotValue, ...] = ()
    value_id: str | None = None

    @property
    def matched(self) -> bool:
        return bool(self.values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "slot": self.slot_name,
            "id": self.value_id,
            "values": [{"id": v.id, "name": v.name} for v in self.values],
        }
