# pythra_leaflet/props.py
"""
Applying declared props onto live native objects.

A callable prop becomes an event subscription through ``native.on``; any
other prop goes through a ``set<Prop>`` method when the native object has one.
Everything else is inert: the native object has no representation for it.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from .base import Bindings, Instance
from .config import Config
from .events import event_name_for, setter_name_for, snake_setter_name_for


def _method(native: Any, name: str) -> Optional[Callable]:
    member = getattr(native, name, None)
    return member if callable(member) else None


def find_setter(native: Any, key: str, config: Optional[Config] = None) -> Optional[Callable]:
    """The bound setter ``native`` exposes for ``key``, or None."""
    prefix = (config or Config()).get("setter_prefix")
    return (_method(native, setter_name_for(key, prefix))
            or _method(native, snake_setter_name_for(key, prefix)))


def apply_prop(native: Any, key: str, value: Any, bindings: Optional[Bindings] = None,
               config: Optional[Config] = None) -> bool:
    """
    Apply one prop. Returns True when the native object took it
    (as an event subscription or through a setter).
    """
    config = config or Config()

    subscribe = _method(native, "on")
    if callable(value) and subscribe is not None:
        event = event_name_for(key, config.get("handler_prefix"))
        subscribe(event, value)
        if bindings is not None:
            bindings[key] = (event, value)
        return True

    setter = find_setter(native, key, config)
    if setter is not None:
        setter(value)
        return True

    if config.get("verbose"):
        print(f"[Props] {type(native).__name__} has no representation for '{key}', skipped")
    return False


def apply_props(native: Any, props: Mapping[str, Any], bindings: Optional[Bindings] = None,
                config: Optional[Config] = None) -> None:
    """
    Apply every prop in ``props``, in mapping order. ``props`` is never mutated.

    :param native: The live native object.
    :param props: Declared prop name -> value.
    :param bindings: Optional dict that records the event subscriptions made.
    """
    config = config or Config()
    for key, value in list(props.items()):
        apply_prop(native, key, value, bindings, config)


def _same(old: Any, new: Any) -> bool:
    if old is new:
        return True
    if callable(old) or callable(new):
        return False
    return old == new


def unbind(native: Any, key: str, bindings: Bindings) -> None:
    """Unsubscribe the handler previously bound for ``key``."""
    event, handler = bindings.pop(key)
    unsubscribe = _method(native, "off")
    if unsubscribe is not None:
        unsubscribe(event, handler)


def update_props(instance: Instance, new_props: Mapping[str, Any],
                 exclude: Optional[set] = None, config: Optional[Config] = None) -> Dict[str, Any]:
    """
    Bring ``instance.native`` from ``instance.props`` to ``new_props``.

    Handlers whose prop was dropped or now holds a different function are
    unsubscribed. New or changed props are applied. Setters are not reverted
    for dropped props, since native objects have no generic "unset".

    :param exclude: Prop names consumed at construction (``options``, ``latlng``...), never re-applied.
    :return: The props that were (re)applied.
    """
    exclude = exclude or set()
    old_props = instance.props
    native = instance.native

    for key in list(instance.bindings):
        _, handler = instance.bindings[key]
        if key not in new_props or new_props[key] is not handler:
            unbind(native, key, instance.bindings)

    changed = {
        key: value for key, value in new_props.items()
        if key not in exclude and (key not in old_props or not _same(old_props[key], value))
    }
    apply_props(native, changed, instance.bindings, config)
    instance.props = dict(new_props)
    return changed
