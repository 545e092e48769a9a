# pythra_leaflet/mount.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Instance
from .host import LeafletHost


@dataclass
class Node:
    """
    A declared element: its tag, its props and its child elements.

    Popups and tooltips keep non-``Node`` children as content for the
    content-rendering service; ``Node`` children become native children.
    """
    kind: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)


def h(kind: str, *children: "Node", **props) -> Node:
    """Shorthand: ``h("lfMap", h("lfTiles", urlTemplate=url), options={...})``."""
    return Node(kind, props, list(children))


def mount(node: Node, container: Any, host: LeafletHost) -> Optional[Instance]:
    """
    Build a declared tree for the first time.

    Children are created before their parent and attached once the parent
    exists; the root map is sized last. This is an initial mount only; later
    edits go through the host operations.
    """
    instance = _create(node, container, host)
    if instance is not None:
        host.commit_mount(instance, container)
    return instance


def _create(node: Node, container: Any, host: LeafletHost) -> Optional[Instance]:
    child_instances = [
        inst for inst in (_create(child, container, host) for child in node.children)
        if inst is not None
    ]
    instance = host.create_instance(node.kind, node.props, container)
    if instance is None:
        return None
    for child in child_instances:
        host.append_child(instance, child)
    return instance
