# tests/test_props.py
import unittest

from pythra_leaflet.base import Instance
from pythra_leaflet.events import event_name_for, setter_name_for
from pythra_leaflet.props import apply_props, update_props

from tests.fake_leaflet import FakeLayer


class TestNameDerivation(unittest.TestCase):
    def test_handler_prefix_is_stripped_and_lowered(self):
        self.assertEqual(event_name_for("onClick"), "click")
        self.assertEqual(event_name_for("onZoomEnd"), "zoomend")

    def test_snake_case_handler(self):
        self.assertEqual(event_name_for("on_move_end"), "move_end")

    def test_lower_case_handler_prefix_is_stripped(self):
        self.assertEqual(event_name_for("onclick"), "click")
        self.assertEqual(event_name_for("onmoveend"), "moveend")

    def test_key_without_prefix_is_lowered_whole(self):
        self.assertEqual(event_name_for("contextMenu"), "contextmenu")
        self.assertEqual(event_name_for("on"), "on")

    def test_lowering_is_locale_independent(self):
        # Turkish dotted/dotless i must not leak in
        self.assertEqual(event_name_for("onIDLE"), "idle")

    def test_setter_name(self):
        self.assertEqual(setter_name_for("opacity"), "setOpacity")
        self.assertEqual(setter_name_for("zIndex"), "setZIndex")
        self.assertEqual(setter_name_for("x"), "setX")


class TestApplyProps(unittest.TestCase):
    def setUp(self):
        self.layer = FakeLayer("marker")

    def test_callable_with_prefix_subscribes_once(self):
        handler = lambda e: None
        apply_props(self.layer, {"onClick": handler})
        self.assertEqual(self.layer.subscriptions, [("click", handler)])

    def test_lower_case_handler_key_subscribes_to_stripped_event(self):
        handler = lambda e: None
        apply_props(self.layer, {"onclick": handler})
        self.assertEqual(self.layer.subscriptions, [("click", handler)])

    def test_callable_without_prefix_still_subscribes(self):
        handler = lambda e: None
        apply_props(self.layer, {"MoveEnd": handler})
        self.assertEqual(self.layer.subscriptions, [("moveend", handler)])

    def test_setter_invoked_once_without_subscription(self):
        apply_props(self.layer, {"opacity": 0.5})
        self.assertEqual(self.layer.calls, [("setOpacity", 0.5)])
        self.assertEqual(self.layer.subscriptions, [])

    def test_unknown_props_are_ignored(self):
        apply_props(self.layer, {"title": "nothing sets this"})
        self.assertEqual(self.layer.calls, [])
        self.assertEqual(self.layer.subscriptions, [])

    def test_props_applied_in_order(self):
        apply_props(self.layer, {"zIndex": 3, "opacity": 1})
        self.assertEqual(self.layer.calls, [("setZIndex", 3), ("setOpacity", 1)])

    def test_props_not_mutated(self):
        props = {"opacity": 0.2, "onClick": print}
        snapshot = dict(props)
        apply_props(self.layer, props)
        self.assertEqual(props, snapshot)

    def test_snake_case_setter_fallback(self):
        class PyLayer:
            def __init__(self):
                self.radius = None

            def set_radius(self, value):
                self.radius = value

        layer = PyLayer()
        apply_props(layer, {"radius": 12})
        self.assertEqual(layer.radius, 12)

    def test_callable_on_object_without_on_falls_back_to_setter(self):
        class StyledLayer:
            def __init__(self):
                self.style = None

            def setStyle(self, value):
                self.style = value

        style_fn = lambda feature: {"color": "red"}
        layer = StyledLayer()
        apply_props(layer, {"style": style_fn})
        self.assertIs(layer.style, style_fn)

    def test_bindings_recorded(self):
        handler = lambda e: None
        bindings = {}
        apply_props(self.layer, {"onClick": handler, "opacity": 1}, bindings)
        self.assertEqual(bindings, {"onClick": ("click", handler)})


class TestUpdateProps(unittest.TestCase):
    def _instance(self, props):
        layer = FakeLayer("circle")
        instance = Instance("lfCircle", "layer", layer, {})
        update_props(instance, props)
        layer.calls.clear()
        return instance, layer

    def test_dropped_handler_is_unsubscribed(self):
        handler = lambda e: None
        instance, layer = self._instance({"onClick": handler})
        update_props(instance, {})
        self.assertEqual(layer.unsubscriptions, [("click", handler)])
        self.assertEqual(layer.subscriptions, [])
        self.assertEqual(instance.bindings, {})

    def test_replaced_handler_is_swapped(self):
        first = lambda e: 1
        second = lambda e: 2
        instance, layer = self._instance({"onClick": first})
        update_props(instance, {"onClick": second})
        self.assertEqual(layer.unsubscriptions, [("click", first)])
        self.assertEqual(layer.subscriptions, [("click", second)])

    def test_same_handler_kept(self):
        handler = lambda e: None
        instance, layer = self._instance({"onClick": handler})
        update_props(instance, {"onClick": handler})
        self.assertEqual(layer.unsubscriptions, [])
        self.assertEqual(layer.subscriptions, [("click", handler)])

    def test_only_changed_values_applied(self):
        instance, layer = self._instance({"opacity": 0.5, "zIndex": 1})
        changed = update_props(instance, {"opacity": 0.5, "zIndex": 2})
        self.assertEqual(changed, {"zIndex": 2})
        self.assertEqual(layer.calls, [("setZIndex", 2)])
        self.assertEqual(instance.props, {"opacity": 0.5, "zIndex": 2})

    def test_excluded_props_not_reapplied(self):
        instance, layer = self._instance({})
        update_props(instance, {"options": {"radius": 3}, "opacity": 1}, exclude={"options"})
        self.assertEqual(layer.calls, [("setOpacity", 1)])


if __name__ == "__main__":
    unittest.main()
