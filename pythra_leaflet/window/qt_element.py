# pythra_leaflet/window/qt_element.py
"""
Qt widgets as visual elements.

Lets a desktop host mount maps into PySide6 widgets: each ``QtElement``
wraps a ``QWidget`` whose children are laid out in a box layout, so sibling
order is the layout order.
"""

import re
from typing import Optional

from PySide6.QtWidgets import QBoxLayout, QSizePolicy, QVBoxLayout, QWidget

QWIDGETSIZE_MAX = 16777215

_PX = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*px\s*$")


class _QtStyle(dict):
    """Style mapping that pushes width/height onto the widget as they are set."""

    def __init__(self, widget: QWidget):
        super().__init__()
        self._widget = widget

    def __setitem__(self, key, value):
        super().__setitem__(key, value)
        if key == "width":
            self._apply(value, self._widget.setFixedWidth, self._widget.setMinimumWidth,
                        self._widget.setMaximumWidth, horizontal=True)
        elif key == "height":
            self._apply(value, self._widget.setFixedHeight, self._widget.setMinimumHeight,
                        self._widget.setMaximumHeight, horizontal=False)

    def _apply(self, value, set_fixed, set_min, set_max, horizontal: bool):
        match = _PX.match(str(value))
        if match:
            set_fixed(round(float(match.group(1))))
            return
        if str(value).strip() == "100%":
            set_min(0)
            set_max(QWIDGETSIZE_MAX)
            policy = self._widget.sizePolicy()
            if horizontal:
                policy.setHorizontalPolicy(QSizePolicy.Policy.Expanding)
            else:
                policy.setVerticalPolicy(QSizePolicy.Policy.Expanding)
            self._widget.setSizePolicy(policy)


class QtElement:
    """
    Visual-element protocol over a ``QWidget``.

    Use ``QtElement.wrap(widget)`` so that one widget always maps to one element.
    """

    def __init__(self, widget: Optional[QWidget] = None):
        self.widget = widget if widget is not None else QWidget()
        self.style = _QtStyle(self.widget)
        self.widget._pythra_element = self

    @classmethod
    def wrap(cls, widget: Optional[QWidget]) -> Optional["QtElement"]:
        if widget is None:
            return None
        existing = getattr(widget, "_pythra_element", None)
        return existing if existing is not None else cls(widget)

    def _layout(self) -> QBoxLayout:
        layout = self.widget.layout()
        if layout is None:
            layout = QVBoxLayout(self.widget)
            layout.setContentsMargins(0, 0, 0, 0)
        return layout

    @property
    def parent_element(self) -> Optional["QtElement"]:
        return QtElement.wrap(self.widget.parentWidget())

    @property
    def children(self):
        layout = self.widget.layout()
        if layout is None:
            return []
        items = (layout.itemAt(i).widget() for i in range(layout.count()))
        return [QtElement.wrap(w) for w in items if w is not None]

    @property
    def client_width(self) -> int:
        return self.widget.contentsRect().width()

    @property
    def client_height(self) -> int:
        return self.widget.contentsRect().height()

    def append_child(self, child: "QtElement") -> "QtElement":
        if child.parent_element is not None:
            child.parent_element.remove_child(child)
        self._layout().addWidget(child.widget)
        return child

    def remove_child(self, child: "QtElement") -> "QtElement":
        self._layout().removeWidget(child.widget)
        child.widget.setParent(None)
        return child

    def insert_before(self, child: "QtElement", reference: Optional["QtElement"]) -> "QtElement":
        if reference is None:
            return self.append_child(child)
        if child.parent_element is not None:
            child.parent_element.remove_child(child)
        layout = self._layout()
        layout.insertWidget(layout.indexOf(reference.widget), child.widget)
        return child

    def __repr__(self):
        return f"QtElement({type(self.widget).__name__})"
