"""Structural type protocols for injected platform capabilities."""

from typing import Any, Protocol


class RequestTypeClassifier(Protocol):
    """Labels a request envelope with its request type (e.g. ``IntentRequest``)."""

    def __call__(self, envelope: Any) -> str | None: ...
