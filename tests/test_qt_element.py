# tests/test_qt_element.py
import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# PySide6 needs a display-capable install; skip cleanly where it is missing.
try:
    from PySide6.QtWidgets import QApplication, QWidget
    from pythra_leaflet.window import QtElement
    MODULE_AVAILABLE = True
except ImportError:
    MODULE_AVAILABLE = False

from pythra_leaflet.base import Instance
from pythra_leaflet.dom import try_reorder
from pythra_leaflet.sizing import set_map_size

from tests.fake_leaflet import FakeLayer, FakeMap


@unittest.skipUnless(MODULE_AVAILABLE, "PySide6 not available")
class TestQtElement(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.pane = QtElement(QWidget())
        self.items = [QtElement(QWidget()) for _ in range(3)]
        for item in self.items:
            self.pane.append_child(item)

    def _instance(self, element):
        layer = FakeLayer("marker")
        layer.element = element
        return Instance("lfMarker", "layer", layer, {})

    def test_wrap_is_stable(self):
        self.assertIs(QtElement.wrap(self.items[0].widget), self.items[0])
        self.assertIs(self.items[0].parent_element, self.pane)

    def test_reorder_follows_layout(self):
        first, second, third = self.items
        self.assertTrue(try_reorder(self._instance(third), self._instance(first)))
        self.assertEqual(self.pane.children, [third, first, second])

    def test_reorder_across_parents_refused(self):
        other = QtElement(QWidget())
        stranger = other.append_child(QtElement(QWidget()))
        self.assertFalse(try_reorder(self._instance(stranger), self._instance(self.items[0])))
        self.assertEqual(self.pane.children, self.items)

    def test_bounds_size_fixes_widget(self):
        container = self.items[0]
        set_map_size(FakeMap(container, {}), container, None, [(0, 0), (120, 80)])
        self.assertEqual(container.widget.minimumWidth(), 120)
        self.assertEqual(container.widget.maximumWidth(), 120)
        self.assertEqual(container.widget.minimumHeight(), 80)
        self.assertEqual(container.style["width"], "120px")


if __name__ == "__main__":
    unittest.main()
