# pythra_leaflet/events.py
"""Mapping from declared prop names to native event and setter names."""

from typing import Optional

from .config import Config


def event_name_for(key: str, handler_prefix: Optional[str] = None) -> str:
    """
    Native event name for a callable prop.

    ``onClick`` -> ``click``, ``onclick`` -> ``click``, ``on_move_end`` -> ``move_end``.
    Keys without the handler prefix (``contextMenu``) are lower-cased whole.
    ``str.lower`` does not depend on the process locale.
    """
    if handler_prefix is None:
        handler_prefix = Config().get("handler_prefix")
    if handler_prefix and key.startswith(handler_prefix) and len(key) > len(handler_prefix):
        rest = key[len(handler_prefix):]
        if rest[0] == "_" and len(rest) > 1:
            rest = rest[1:]
        return rest.lower()
    return key.lower()


def setter_name_for(key: str, setter_prefix: Optional[str] = None) -> str:
    """``opacity`` -> ``setOpacity``; ``zIndex`` -> ``setZIndex``."""
    if setter_prefix is None:
        setter_prefix = Config().get("setter_prefix")
    if not key:
        return setter_prefix
    return setter_prefix + key[0].upper() + key[1:]


def snake_setter_name_for(key: str, setter_prefix: Optional[str] = None) -> str:
    """``z_index`` -> ``set_z_index``, for natives with Python-style method names."""
    if setter_prefix is None:
        setter_prefix = Config().get("setter_prefix")
    return f"{setter_prefix}_{key}"
