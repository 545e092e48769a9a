# pythra_leaflet/__init__.py

"""
PyThra Leaflet Bridge

Turns a declarative tree of map elements (a map, markers, polygons, overlays,
controls, handlers) into live objects of a Leaflet-style native library, and
keeps those objects in step as the tree is edited.
"""

# --- Configuration ---
from .config import Config, get_config

# --- Kinds & Instances ---
from .kinds import Category, ElementKind, ExtensionKind, parse_kind
from .base import Instance
from .catalog import CATALOG, CatalogEntry

# --- Registry ---
from .registry import ObjectRegistry, RenderContext, default_registry

# --- Core operations ---
from .props import apply_props, update_props
from .events import event_name_for, setter_name_for
from .factory import create_instance
from .dom import Element, element_of, try_reorder
from .sizing import set_map_size

# --- Host lifecycle ---
from .host import LeafletHost
from .mount import Node, h, mount

# --- Errors ---
from .exceptions import LeafletBridgeError, MapSizeError, MissingPropError, UnknownElementError

__all__ = [
    'Config', 'get_config',
    'Category', 'ElementKind', 'ExtensionKind', 'parse_kind',
    'Instance', 'CATALOG', 'CatalogEntry',
    'ObjectRegistry', 'RenderContext', 'default_registry',
    'apply_props', 'update_props', 'event_name_for', 'setter_name_for',
    'create_instance',
    'Element', 'element_of', 'try_reorder',
    'set_map_size',
    'LeafletHost', 'Node', 'h', 'mount',
    'LeafletBridgeError', 'MapSizeError', 'MissingPropError', 'UnknownElementError',
]

__version__ = "0.1.0"
