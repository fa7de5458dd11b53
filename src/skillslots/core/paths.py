"""Safe nested lookups over decoded JSON structures.

``get_or`` walks a path of mapping keys and sequence indices and falls
back to a default as soon as a key is not owned by the current container.
A key that is present with a ``None`` value is returned as ``None``; pass
``MISSING`` as the default to tell the two cases apart.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Final, TypeVar

T = TypeVar("T")

PathKey = str | int
KeyPath = Sequence[PathKey]


class _Missing:
    """Sentinel type for "no such key"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def _sequence_index(container: Sequence[Any], key: PathKey) -> int | None:
    """Return *key* as an index into *container*, or None if not owned."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        index = key
    elif isinstance(key, str) and key.isdecimal() and str(int(key)) == key:
        index = int(key)
    else:
        return None
    if 0 <= index < len(container):
        return index
    return None


def is_sequence(value: Any) -> bool:
    """True for lists, tuples and other sequences that are not text or bytes."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def get_or(root: Any, path: KeyPath, default: Any = None) -> Any:
    """Return the value at *path* inside *root*, or *default*.

    Mappings own their keys, with an int key also matching its string
    form (``0`` finds ``"0"``); lists and tuples own the non-negative
    indices below their length, given as ints or canonical digit strings.
    Scalars (strings included) own nothing. An empty path returns *root*
    itself. Never raises for absent keys.
    """
    current = root
    for key in path:
        if isinstance(current, Mapping):
            try:
                owned = key in current
            except TypeError:
                # Unhashable key.
                return default
            if not owned and isinstance(key, int) and not isinstance(key, bool):
                # Decoded JSON objects only have string keys.
                key = str(key)
                owned = key in current
            if not owned:
                return default
            current = current[key]
        elif is_sequence(current):
            index = _sequence_index(current, key)
            if index is None:
                return default
            current = current[index]
        else:
            return default
    return current


def has_path(root: Any, path: KeyPath) -> bool:
    """True when every key along *path* is owned, even if the leaf is None."""
    return get_or(root, path, MISSING) is not MISSING


def find_first(
    sequence: Sequence[T],
    predicate: Callable[[T, int, Sequence[T]], Any],
    default: Any = None,
) -> Any:
    """Return the first element for which *predicate* is truthy.

    The predicate receives ``(element, index, sequence)``. Scanning stops
    at the first match; *default* is returned when nothing matches.
    """
    for index, element in enumerate(sequence):
        if predicate(element, index, sequence):
            return element
    return default
