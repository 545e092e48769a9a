# pythra_leaflet/catalog.py
"""
The closed catalog of built-in element kinds.

Each entry says which native factory builds the kind and which declared
props are its positional arguments. ``options`` is always passed last.
Props listed in ``positional`` or ``consumed`` are taken by construction;
the rest are applied afterwards through the prop applier.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .kinds import Category, ElementKind


@dataclass(frozen=True)
class CatalogEntry:
    kind: ElementKind
    constructor: str
    positional: Tuple[str, ...] = ()
    # positional props that may be left out (passed as None)
    optional: Tuple[str, ...] = ()
    consumed: Tuple[str, ...] = ()

    @property
    def category(self) -> Category:
        return self.kind.category

    @property
    def construction_props(self) -> Tuple[str, ...]:
        return self.positional + ("options",) + self.consumed

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(p for p in self.positional if p not in self.optional)


CATALOG: Dict[ElementKind, CatalogEntry] = {entry.kind: entry for entry in (
    CatalogEntry(ElementKind.MAP, "map", consumed=("whenReady", "style", "children")),
    CatalogEntry(ElementKind.IMAGE, "imageOverlay", ("imageUrl", "bounds")),
    CatalogEntry(ElementKind.POPUP, "popup", consumed=("children", "latlng")),
    CatalogEntry(ElementKind.TOOLTIP, "tooltip", consumed=("children",)),
    CatalogEntry(ElementKind.RECTANGLE, "rectangle", ("bounds",)),
    CatalogEntry(ElementKind.MARKER, "marker", ("latlng",), consumed=("iconOptions",)),
    CatalogEntry(ElementKind.TILES, "tileLayer", ("urlTemplate",)),
    CatalogEntry(ElementKind.TILES_WMS, "tileLayer.wms", ("baseUrl",)),
    CatalogEntry(ElementKind.VIDEO, "videoOverlay", ("video", "bounds")),
    CatalogEntry(ElementKind.POLYLINE, "polyline", ("latlngs",)),
    CatalogEntry(ElementKind.POLYGON, "polygon", ("latlngs",)),
    CatalogEntry(ElementKind.CIRCLE, "circle", ("latlng",)),
    CatalogEntry(ElementKind.CIRCLE_MARKER, "circleMarker", ("latlng",)),
    CatalogEntry(ElementKind.SVG, "svgOverlay", ("svgImage", "bounds")),
    CatalogEntry(ElementKind.LAYER_GROUP, "layerGroup", ("layers",), optional=("layers",),
                 consumed=("children",)),
    CatalogEntry(ElementKind.FEATURE_GROUP, "featureGroup", ("layers",), optional=("layers",),
                 consumed=("children",)),
    CatalogEntry(ElementKind.GEOJSON, "geoJSON", ("geojson",), optional=("geojson",)),
    CatalogEntry(ElementKind.GRID_LAYER, "gridLayer"),
)}


def resolve_constructor(lib: Any, path: str):
    """Look up a dotted factory path (``"tileLayer.wms"``) on the native library."""
    target = lib
    for part in path.split("."):
        target = getattr(target, part)
    return target
