# pythra_leaflet/host.py
"""
LeafletHost - the operations a reconciliation runtime calls.

The runtime decides *when* to create, attach, move, update and remove
elements; the host does the native work for each of those steps:

- **create_instance**: build the native object for an element.
- **append_child / insert_before / remove_child**: keep the native object
  graph (map -> layers, groups -> layers, layers -> popups) in step with the
  declared tree. ``insert_before`` first tries to move the visual element in
  place and falls back to removing and re-adding layers in order.
- **commit_update**: move a live native object from its old props to new ones.
- **commit_mount**: size a map once it is in the tree.
"""

from typing import Any, Callable, List, Mapping, Optional

from .base import Instance
from .config import Config
from .dom import try_reorder
from .factory import create_instance
from .props import update_props
from .registry import ContentRenderer, ObjectRegistry, RenderContext
from .sizing import set_map_size


# Construction-only props, never re-applied on update.
UPDATE_EXCLUDED = frozenset({
    "children", "options", "klass", "params", "whenReady", "iconOptions", "style", "layers",
})


class LeafletHost:
    """
    Bridge between a declarative element tree and a native Leaflet-style library.

    :param lib: Namespace of the native library.
    :param registry: Registry for this render root; the process-wide one by default.
    :param element_factory: Builds detached elements (popup/tooltip content).
    :param config: Settings; the ``Config`` singleton by default.
    """

    def __init__(
        self,
        lib: Any,
        registry: Optional[ObjectRegistry] = None,
        element_factory: Optional[Callable[[str], Any]] = None,
        config: Optional[Config] = None,
    ):
        self.context = RenderContext(lib, registry, element_factory, config)

    @property
    def config(self) -> Config:
        return self.context.config

    def _log(self, message: str) -> None:
        if self.config.get("verbose"):
            print(f"[LeafletHost] {message}")

    # ----- services -----
    def register_content_renderer(self, renderer: Optional[ContentRenderer]) -> None:
        """Register the callback that mounts declared children into a detached element."""
        self.context.register_content_renderer(renderer)

    def map_for(self, container: Any) -> Any:
        return self.context.map_for(container)

    # ----- creation -----
    def create_instance(self, kind, props: Optional[Mapping[str, Any]], root_container: Any) -> Optional[Instance]:
        return create_instance(kind, props, root_container, self.context)

    # ----- native attach/detach -----
    def _attach(self, parent: Instance, child: Instance) -> None:
        native = parent.native
        if child.category == "control":
            native.addControl(child.native)
        elif child.category == "handler":
            native.addHandler(self._handler_name(child), child.native)
        elif child.kind == "lfPopup" and parent.category == "layer":
            native.bindPopup(child.native)
        elif child.kind == "lfTooltip" and parent.category == "layer":
            native.bindTooltip(child.native)
        elif child.category == "map":
            raise ValueError(f"{child!r} is a root and cannot be mounted under {parent!r}")
        else:
            native.addLayer(child.native)

    def _detach(self, parent: Instance, child: Instance) -> None:
        native = parent.native
        if child.category == "control":
            native.removeControl(child.native)
        elif child.category == "handler":
            handler = getattr(native, self._handler_name(child), None)
            if handler is not None and callable(getattr(handler, "disable", None)):
                handler.disable()
        elif child.kind == "lfPopup" and parent.category == "layer":
            native.unbindPopup()
        elif child.kind == "lfTooltip" and parent.category == "layer":
            native.unbindTooltip()
        else:
            native.removeLayer(child.native)

    @staticmethod
    def _handler_name(child: Instance) -> str:
        name = child.props.get("name")
        if not name:
            klass = child.native
            name = getattr(klass, "__name__", child.kind)
            name = name[0].lower() + name[1:]
        return name

    # ----- tree operations -----
    def append_child(self, parent: Instance, child: Instance) -> None:
        if child.parent is not None:
            self.remove_child(child.parent, child)
        self._attach(parent, child)
        parent.children.append(child)
        child.parent = parent
        self._log(f"appended {child.kind} to {parent.kind}")

    def insert_before(self, parent: Instance, child: Instance, before: Instance) -> None:
        """
        Place ``child`` right before ``before`` under ``parent``.

        The visual element is moved in place when possible. Otherwise ``child``
        and every sibling from ``before`` onward are removed from the native
        parent and added back in order.

        :raises ValueError: ``before`` is not a child of ``parent``, or is ``child``
            itself. Nothing is changed in that case.
        """
        if before is child or before not in parent.children:
            raise ValueError(f"{before.kind} is not a sibling to insert {child.kind} before")

        if child.parent is not parent:
            if child.parent is not None:
                self.remove_child(child.parent, child)
            self._attach(parent, child)
            child.parent = parent
        else:
            parent.children.remove(child)

        index = parent.children.index(before)
        parent.children.insert(index, child)

        if try_reorder(child, before):
            self._log(f"reordered {child.kind} in place")
            return

        following: List[Instance] = parent.children[index + 1:]
        self._detach(parent, child)
        for sibling in following:
            self._detach(parent, sibling)
        self._attach(parent, child)
        for sibling in following:
            self._attach(parent, sibling)
        self._log(f"re-added {child.kind} and {len(following)} following sibling(s)")

    def remove_child(self, parent: Instance, child: Instance) -> None:
        self._detach(parent, child)
        if child in parent.children:
            parent.children.remove(child)
        child.parent = None
        self._log(f"removed {child.kind} from {parent.kind}")

    def remove_from_container(self, instance: Instance, container: Any) -> None:
        """Tear down a root map mounted into ``container``."""
        if instance.category == "map":
            instance.native.remove()
            if self.context.registry.get(container) is instance.native:
                self.context.registry.remove(container)

    # ----- updates -----
    def commit_update(self, instance: Instance, new_props: Mapping[str, Any]) -> None:
        """Apply ``new_props`` to the live native object of ``instance``."""
        if instance.category in ("control", "handler"):
            # these configure themselves from constructor params
            instance.props = dict(new_props)
            return

        old_children = instance.props.get("children")
        update_props(instance, new_props, exclude=set(UPDATE_EXCLUDED), config=self.config)

        renderer = self.context.content_renderer
        children = new_props.get("children")
        if instance.content is not None and renderer is not None and children is not old_children:
            renderer(children, instance.content)

    # ----- mounting -----
    def commit_mount(self, instance: Instance, root_container: Any) -> None:
        """Size a map once it is attached to its container."""
        if instance.category != "map":
            return
        style = instance.props.get("style")
        container_style = getattr(root_container, "style", None)
        if style and container_style is not None:
            for key, value in style.items():
                container_style[key] = value
        self.refresh_size(instance, root_container)

    def refresh_size(self, instance: Instance, root_container: Any) -> None:
        """Recompute the map size, e.g. after the container was resized."""
        options = instance.props.get("options") or {}
        set_map_size(
            instance.native,
            root_container,
            instance.props.get("style"),
            options.get("maxBounds"),
            lib=self.context.lib,
            config=self.config,
        )
