# pythra_leaflet/dom.py
"""
Visual elements and in-place sibling reordering.

The reorder and sizing code only needs a small protocol from an element:
``parent_element``, ``remove_child``, ``insert_before``, ``style``,
``client_width`` and ``client_height``. ``Element`` implements it in plain
Python (detached popup content, headless hosts, tests); ``window.qt_element``
implements it over Qt widgets.
"""

import html
from typing import Any, Dict, List, Optional

from .base import Instance


class Element:
    """
    A minimal node of a visual tree.

    :param tag: Tag name, used when rendering to HTML.
    :param client_width: Content-box width in pixels.
    :param client_height: Content-box height in pixels.
    """

    def __init__(self, tag: str = "div", client_width: float = 0, client_height: float = 0):
        self.tag = tag
        self.parent_element: Optional["Element"] = None
        self.children: List["Element"] = []
        self.style: Dict[str, str] = {}
        self.attributes: Dict[str, str] = {}
        self.text_content: str = ""
        self.client_width = client_width
        self.client_height = client_height

    def append_child(self, child: "Element") -> "Element":
        if child.parent_element is not None:
            child.parent_element.remove_child(child)
        self.children.append(child)
        child.parent_element = self
        return child

    def remove_child(self, child: "Element") -> "Element":
        if child.parent_element is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        self.children.remove(child)
        child.parent_element = None
        return child

    def insert_before(self, child: "Element", reference: Optional["Element"]) -> "Element":
        """Insert ``child`` right before ``reference``; at the end when reference is None."""
        if reference is None:
            return self.append_child(child)
        if reference.parent_element is not self:
            raise ValueError(f"{reference!r} is not a child of {self!r}")
        if child.parent_element is not None:
            child.parent_element.remove_child(child)
        self.children.insert(self.children.index(reference), child)
        child.parent_element = self
        return child

    def to_html(self) -> str:
        attrs = dict(self.attributes)
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        attr_str = "".join(f' {k}="{html.escape(str(v), quote=True)}"' for k, v in attrs.items())
        inner = html.escape(self.text_content) + "".join(c.to_html() for c in self.children)
        return f"<{self.tag}{attr_str}>{inner}</{self.tag}>"

    def __repr__(self):
        return f"Element({self.tag!r}, children={len(self.children)})"


def element_of(native: Any) -> Any:
    """
    The visual element backing a native object: ``getElement()`` first,
    then ``getContainer()``. None when neither yields one.
    """
    for accessor in ("getElement", "getContainer"):
        method = getattr(native, accessor, None)
        if callable(method):
            element = method()
            if element:
                return element
    return None


def try_reorder(child: Optional[Instance], before: Optional[Instance]) -> bool:
    """
    Move ``child``'s element right before ``before``'s element, in place.

    Only possible when both resolve to an element and share the same parent;
    Leaflet draws some layers into panes or canvases it manages itself.
    Returns False, without touching anything, when the move is not possible.
    """
    element = element_of(child.native) if child is not None else None
    element_before = element_of(before.native) if before is not None else None
    if element is None or element_before is None or element is element_before:
        return False

    parent = getattr(element, "parent_element", None)
    if parent is None or parent is not getattr(element_before, "parent_element", None):
        return False

    parent.remove_child(element)
    parent.insert_before(element, element_before)
    return True
