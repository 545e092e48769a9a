# pythra_leaflet/factory.py
"""
Instance creation: turning a typed element description into a live native object.

``create_instance`` dispatches on the element kind. Catalog kinds are built
from ``catalog.CATALOG``, with a few kinds needing extra work (maps register
themselves, popups and tooltips get a content element, markers get a default
icon). Extension kinds (``*Layer``, ``*Control``, ``*Handler``) are built
from the class passed in their ``klass`` prop.
"""

from typing import Any, Mapping, Optional

from .base import Instance
from .catalog import CATALOG, CatalogEntry, resolve_constructor
from .exceptions import MissingPropError
from .kinds import ElementKind, ExtensionKind, Kind, parse_kind
from .props import apply_props
from .registry import RenderContext


EXTENSION_PROPS = ("klass", "params", "children")


def _split(entry: CatalogEntry, props: Mapping[str, Any]):
    """Positional construction args, and the generic props left for the prop applier."""
    # missing positionals go through as None; the native factory decides
    args = [props.get(name) for name in entry.positional]
    rest = {k: v for k, v in props.items() if k not in entry.construction_props}
    return args, rest


def _create_map(entry: CatalogEntry, props, root_container, context: RenderContext):
    mp = resolve_constructor(context.lib, entry.constructor)(root_container, props.get("options"))

    when_ready = props.get("whenReady")
    if when_ready is not None:
        # hand the native map over, not the instance
        mp.whenReady(lambda *_: when_ready(mp))

    context.registry.add(root_container, mp)
    return mp


def _create_content_layer(entry: CatalogEntry, props, context: RenderContext):
    layer = resolve_constructor(context.lib, entry.constructor)(props.get("options"))
    element = context.create_element(context.config.get("content_tag"))
    layer.setContent(element)
    if entry.kind is ElementKind.POPUP and props.get("latlng") is not None:
        layer.setLatLng(props["latlng"])
    return layer, element


def _create_marker(entry: CatalogEntry, props, context: RenderContext):
    args, _ = _split(entry, props)
    icon = context.lib.icon({
        "iconUrl": context.config.get("marker_icon_url"),
        "shadowUrl": context.config.get("marker_shadow_url"),
        **(props.get("iconOptions") or {}),
    })
    options = {"icon": icon, **(props.get("options") or {})}
    return resolve_constructor(context.lib, entry.constructor)(*args, options)


def _create_catalog(kind: ElementKind, props: Mapping[str, Any], root_container,
                    context: RenderContext) -> Instance:
    entry = CATALOG[kind]
    _, rest = _split(entry, props)
    instance = Instance(kind.value, entry.category, None, dict(props))

    if kind is ElementKind.MAP:
        instance.native = _create_map(entry, props, root_container, context)
        apply_props(instance.native, rest, instance.bindings, context.config)

    elif kind in (ElementKind.POPUP, ElementKind.TOOLTIP):
        instance.native, instance.content = _create_content_layer(entry, props, context)
        apply_props(instance.native, rest, instance.bindings, context.config)
        renderer = context.content_renderer
        if renderer is not None:
            renderer(props.get("children"), instance.content)

    elif kind is ElementKind.MARKER:
        instance.native = _create_marker(entry, props, context)
        apply_props(instance.native, rest, instance.bindings, context.config)

    else:
        args, _ = _split(entry, props)
        instance.native = resolve_constructor(context.lib, entry.constructor)(*args, props.get("options"))
        apply_props(instance.native, rest, instance.bindings, context.config)

    return instance


def _create_extension(kind: ExtensionKind, props: Mapping[str, Any],
                      context: RenderContext) -> Instance:
    klass = props.get("klass")
    if klass is None:
        raise MissingPropError(kind.tag, "klass")

    instance = Instance(kind.tag, kind.category, None, dict(props))

    if kind.category == "handler":
        # Leaflet builds handlers itself, in map.addHandler(name, klass).
        instance.native = klass
        return instance

    instance.native = klass({
        **(props.get("params") or {}),
        "children": props.get("children"),
        context.renderer_key: context.content_renderer,
    })
    if kind.category == "layer":
        rest = {k: v for k, v in props.items() if k not in EXTENSION_PROPS}
        apply_props(instance.native, rest, instance.bindings, context.config)
    return instance


def create_instance(kind, props: Optional[Mapping[str, Any]], root_container: Any,
                    context: RenderContext) -> Optional[Instance]:
    """
    Build the native object for one declared element.

    :param kind: Element tag (``"lfMarker"``, ``"lfHeatLayer"``...) or an already parsed kind.
    :param props: Declared props. Not mutated; a copy is kept on the instance.
    :param root_container: The container of the render root; maps mount into it.
    :param context: Native library, registry and settings for this render root.
    :return: The new instance, or None when the tag does not belong to the bridge.
    :raises UnknownElementError: reserved-prefix tag that matches no kind.
    :raises MissingPropError: an extension element has no ``klass``.
    """
    props = props or {}
    parsed: Optional[Kind] = parse_kind(kind, context.config.get("reserved_prefix"))
    if parsed is None:
        return None

    if isinstance(parsed, ElementKind):
        instance = _create_catalog(parsed, props, root_container, context)
    else:
        instance = _create_extension(parsed, props, context)

    if context.config.get("verbose"):
        print(f"[Factory] created {instance!r}")
    return instance
