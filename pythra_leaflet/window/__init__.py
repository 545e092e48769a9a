# pythra_leaflet/window/__init__.py
# Qt-backed visual elements; importing this package requires PySide6.
from .qt_element import QtElement

__all__ = ["QtElement"]
