# tests/test_kinds.py
import unittest

from pythra_leaflet.kinds import ElementKind, ExtensionKind, parse_kind
from pythra_leaflet.exceptions import UnknownElementError


class TestParseKind(unittest.TestCase):
    def test_catalog_kinds(self):
        self.assertIs(parse_kind("lfMap"), ElementKind.MAP)
        self.assertIs(parse_kind("lfGridLayer"), ElementKind.GRID_LAYER)
        self.assertEqual(ElementKind.TILES_WMS, "lfTilesWMS")

    def test_catalog_wins_over_suffix(self):
        # lfGridLayer ends with "Layer" but is a catalog kind
        self.assertIsInstance(parse_kind("lfGridLayer"), ElementKind)

    def test_extension_suffixes(self):
        self.assertEqual(parse_kind("lfHeatLayer"), ExtensionKind("lfHeatLayer", "layer"))
        self.assertEqual(parse_kind("lfScaleControl"), ExtensionKind("lfScaleControl", "control"))
        self.assertEqual(parse_kind("lfBoxZoomHandler"), ExtensionKind("lfBoxZoomHandler", "handler"))
        # outside the reserved prefix too
        self.assertEqual(parse_kind("MyLayer").category, "layer")

    def test_suffix_must_end_the_tag(self):
        with self.assertRaises(UnknownElementError):
            parse_kind("lfLayerThing")

    def test_unknown_reserved(self):
        with self.assertRaises(UnknownElementError) as ctx:
            parse_kind("lfNothing")
        self.assertEqual(ctx.exception.kind, "lfNothing")

    def test_foreign_tags(self):
        self.assertIsNone(parse_kind("div"))
        self.assertIsNone(parse_kind("Layer"))

    def test_custom_reserved_prefix(self):
        self.assertIsNone(parse_kind("lfNothing", reserved_prefix="leaflet-"))
        with self.assertRaises(UnknownElementError):
            parse_kind("leaflet-nothing", reserved_prefix="leaflet-")

    def test_categories(self):
        self.assertEqual(ElementKind.MAP.category, "map")
        self.assertEqual(ElementKind.LAYER_GROUP.category, "layergroup")
        self.assertEqual(ElementKind.FEATURE_GROUP.category, "featuregroup")
        self.assertEqual(ElementKind.POLYGON.category, "layer")


if __name__ == "__main__":
    unittest.main()
