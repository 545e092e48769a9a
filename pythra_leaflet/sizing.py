# pythra_leaflet/sizing.py
import math
from typing import Any, Mapping, Optional, Sequence

from .config import Config
from .exceptions import MapSizeError


def _coords(point: Any):
    if hasattr(point, "x") and hasattr(point, "y"):
        return point.x, point.y
    return point[0], point[1]


def _distance(lib: Any, origin: Any, x: float, y: float) -> float:
    """Planar distance from a projected point to (x, y), through the native point type when there is one."""
    distance_to = getattr(origin, "distanceTo", None)
    make_point = getattr(lib, "point", None) if lib is not None else None
    if callable(distance_to) and callable(make_point):
        return distance_to(make_point(x, y))
    ox, oy = _coords(origin)
    return math.hypot(x - ox, y - oy)


def _px(value: float) -> str:
    value = float(value)
    return f"{int(value)}px" if value.is_integer() else f"{value}px"


def set_map_size(
    map: Any,
    container: Any,
    style: Optional[Mapping[str, Any]] = None,
    max_bounds: Optional[Sequence[Any]] = None,
    lib: Any = None,
    config: Optional[Config] = None,
) -> None:
    """
    Give a map container the pixel size Leaflet needs, then let the map re-measure.

    In order of preference:
      1. ``style`` carries both width and height: the host already sized the container.
      2. ``max_bounds`` is given: size the container to the projected bounds.
      3. Fill the parent element. Warns when the parent is smaller than
         ``min_container_px`` in either dimension.

    :param map: The native map (``latLngToContainerPoint``, ``invalidateSize``).
    :param container: The element the map was mounted into.
    :param style: Style declared on the map element.
    :param max_bounds: ``[south_west, north_east]`` corners, as the map options carry them.
    :param lib: Native library, for its ``latLng`` and ``point`` types.
    :raises MapSizeError: none of the above can give a size.
    """
    config = config or Config()

    if style and style.get("width") and style.get("height"):
        pass
    elif max_bounds:
        make_latlng = getattr(lib, "latLng", None) if lib is not None else None
        corners = [make_latlng(c) if callable(make_latlng) else c for c in max_bounds[:2]]
        nw = map.latLngToContainerPoint(corners[0])
        se = map.latLngToContainerPoint(corners[1])
        nw_x, nw_y = _coords(nw)
        se_x, se_y = _coords(se)
        width = _distance(lib, nw, se_x, nw_y)
        height = _distance(lib, nw, nw_x, se_y)
        container.style["width"] = _px(width)
        container.style["height"] = _px(height)
    else:
        parent = getattr(container, "parent_element", None)
        if parent is None:
            raise MapSizeError(
                "pythra-leaflet: unable to determine the map dimensions. Leaflet requires them, "
                "but no size was given. We tried to find a parent element to fill, but could not find one."
            )

        minimum = config.get("min_container_px")
        if parent.client_width < minimum or parent.client_height < minimum:
            print(
                f"⚠️ [MapSize] width or height is less than {minimum}px. We found a parent element to use "
                f'for dimensions, but it has a width of "{parent.client_width}px" and a height of '
                f'"{parent.client_height}px".'
            )

        container.style["width"] = "100%"
        container.style["height"] = "100%"

    map.invalidateSize()
