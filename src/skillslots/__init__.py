__version__ = "0.2.0"


def __getattr__(name: str):
    """Lazy re-exports from skillslots.api and skillslots.core."""
    _api_names = {
        "EnvelopeError",
        "load_envelope",
        "resolve_slot",
        "resolve_slots",
    }
    _core_names = {
        "MISSING",
        "SlotResolution",
        "SlotValue",
        "find_first",
        "get_or",
        "get_request_type",
        "get_slot_value_id",
        "get_slot_values_from_match",
        "has_path",
    }
    if name in _api_names:
        from skillslots import api

        return getattr(api, name)
    if name in _core_names:
        from skillslots import core

        return getattr(core, name)
    raise AttributeError(f"module 'skillslots' has no attribute {name!r}")
