# pythra_leaflet/base.py
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .kinds import Category


# prop key -> (native event name, handler)
Bindings = Dict[str, Tuple[str, Callable]]


@dataclass(eq=False)
class Instance:
    """
    The bridge's handle on one live native object.

    The reconciliation runtime creates, updates, moves and deletes these;
    the native object inside is never replaced for a prop-only change.

    :attr kind: Tag of the element that created this instance (``"lfMarker"``...).
    :attr category: Coarse role, derived from ``kind`` once at creation.
    :attr native: The live object from the native mapping library.
    :attr props: The last declared props, the baseline for the next update.
    :attr bindings: Event handlers subscribed from props, keyed by prop name.
    :attr children: Mounted child instances, in declaration order.
    :attr parent: The instance this one is mounted under, if any.
    :attr content: Detached element that popup/tooltip children render into.
    """
    kind: str
    category: Category
    native: Any
    props: Dict[str, Any]
    bindings: Bindings = field(default_factory=dict)
    content: Any = field(default=None, repr=False)
    children: List["Instance"] = field(default_factory=list)
    parent: Optional["Instance"] = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return self.category == "map"

    def __repr__(self):
        return f"Instance(kind={self.kind!r}, category={self.category!r}, native={type(self.native).__name__})"
