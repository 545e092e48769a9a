# pythra_leaflet/exceptions.py
"""Errors raised by the Leaflet bridge."""

from typing import Optional


class LeafletBridgeError(Exception):
    """Base class for every error raised by pythra_leaflet."""


class UnknownElementError(LeafletBridgeError, ValueError):
    """
    Raised when a tag carries the reserved prefix but matches neither the
    catalog nor one of the extension suffixes.

    :param kind: The offending element tag.
    """
    def __init__(self, kind: str, message: Optional[str] = None):
        self.kind = kind
        if message is None:
            message = (
                f"pythra-leaflet: Unknown type {kind}. If you are trying to use a custom "
                f'element, make sure that its tag name ends with one of "Control", '
                f'"Layer" or "Handler".'
            )
        super().__init__(message)


class MissingPropError(LeafletBridgeError, KeyError):
    """A required prop for an element kind was not declared."""

    def __init__(self, kind: str, prop: str):
        self.kind = kind
        self.prop = prop
        super().__init__(f"pythra-leaflet: <{kind}> requires the '{prop}' prop.")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return self.args[0]


class MapSizeError(LeafletBridgeError, RuntimeError):
    """The map container has no explicit size, no bounds and no parent element."""
