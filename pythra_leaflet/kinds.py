# pythra_leaflet/kinds.py
"""
Element kinds understood by the bridge.

Tags are split into a closed set of catalog kinds (``ElementKind``) and
open-ended extension kinds (``ExtensionKind``) that wrap a user-supplied
native class. ``parse_kind`` turns a raw tag into one of the two.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Tuple, Union

from .config import Config
from .exceptions import UnknownElementError


Category = Literal["map", "layer", "layergroup", "featuregroup", "control", "handler"]

CATEGORIES: Tuple[str, ...] = ("map", "layer", "layergroup", "featuregroup", "control", "handler")


class ElementKind(str, Enum):
    MAP = "lfMap"
    IMAGE = "lfImage"
    POPUP = "lfPopup"
    TOOLTIP = "lfTooltip"
    RECTANGLE = "lfRectangle"
    MARKER = "lfMarker"
    TILES = "lfTiles"
    TILES_WMS = "lfTilesWMS"
    VIDEO = "lfVideo"
    POLYLINE = "lfPolyline"
    POLYGON = "lfPolygon"
    CIRCLE = "lfCircle"
    CIRCLE_MARKER = "lfCircleMarker"
    SVG = "lfSVG"
    LAYER_GROUP = "lfLayerGroup"
    FEATURE_GROUP = "lfFeatureGroup"
    GEOJSON = "lfGeoJSON"
    GRID_LAYER = "lfGridLayer"

    def __str__(self) -> str:
        return self.value

    @property
    def category(self) -> Category:
        return KIND_CATEGORIES[self]


KIND_CATEGORIES = {
    kind: ("map" if kind is ElementKind.MAP
           else "layergroup" if kind is ElementKind.LAYER_GROUP
           else "featuregroup" if kind is ElementKind.FEATURE_GROUP
           else "layer")
    for kind in ElementKind
}

# Checked in this order, so "FooLayerControl" is a control.
EXTENSION_SUFFIXES: Tuple[Tuple[str, Category], ...] = (
    ("Layer", "layer"),
    ("Control", "control"),
    ("Handler", "handler"),
)


@dataclass(frozen=True)
class ExtensionKind:
    """A user-defined element backed by the class passed in its ``klass`` prop."""
    tag: str
    category: Category

    def __str__(self) -> str:
        return self.tag


Kind = Union[ElementKind, ExtensionKind]

_BY_TAG = {kind.value: kind for kind in ElementKind}


def extension_category(tag: str) -> Optional[Category]:
    for suffix, category in EXTENSION_SUFFIXES:
        if tag.endswith(suffix) and len(tag) > len(suffix):
            return category
    return None


def parse_kind(tag: Union[str, Kind], reserved_prefix: Optional[str] = None) -> Optional[Kind]:
    """
    Classify an element tag.

    :param tag: The raw tag (``"lfMarker"``, ``"lfHeatLayer"``...). Already parsed kinds pass through.
    :param reserved_prefix: Tag prefix owned by the bridge; defaults to the configured one.
    :return: The catalog kind, the extension kind, or None for a tag the bridge does not own.
    :raises UnknownElementError: the tag has the reserved prefix but matches nothing.
    """
    if isinstance(tag, (ElementKind, ExtensionKind)):
        return tag

    kind = _BY_TAG.get(tag)
    if kind is not None:
        return kind

    category = extension_category(tag)
    if category is not None:
        return ExtensionKind(tag, category)

    if reserved_prefix is None:
        reserved_prefix = Config().get("reserved_prefix")
    if tag.startswith(reserved_prefix):
        raise UnknownElementError(tag)
    return None
