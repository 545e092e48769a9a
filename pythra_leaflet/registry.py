# pythra_leaflet/registry.py
"""
Keyed storage for root maps and shared services.

Keys are either container objects (a map is stored under the element it was
mounted into) or well-known strings such as the content-rendering service key.
``default_registry`` is the process-wide store; a ``RenderContext`` can own a
private one so that two render roots do not see each other's services.
"""

from typing import Any, Callable, Dict, Hashable, Iterator, Optional, Tuple

from .config import Config


ContentRenderer = Callable[[Any, Any], None]

_MISSING = object()


class ObjectRegistry:
    """A key -> value store where later writes overwrite earlier ones."""

    def __init__(self):
        self._entries: Dict[Hashable, Tuple[Any, Any]] = {}

    @staticmethod
    def _slot(key: Any) -> Hashable:
        # Unhashable containers are tracked by identity.
        try:
            hash(key)
        except TypeError:
            return ("__id__", id(key))
        return key

    def add(self, key: Any, value: Any) -> None:
        self._entries[self._slot(key)] = (key, value)

    def get(self, key: Any, default: Any = None) -> Any:
        entry = self._entries.get(self._slot(key), _MISSING)
        if entry is _MISSING:
            return default
        return entry[1]

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value, or None if it was not stored."""
        entry = self._entries.pop(self._slot(key), None)
        return entry[1] if entry else None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Any) -> bool:
        return self._slot(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self._entries.values())


default_registry = ObjectRegistry()


def add(key: Any, value: Any) -> None:
    """Store ``value`` under ``key`` in the process-wide registry."""
    default_registry.add(key, value)


def get(key: Any, default: Any = None) -> Any:
    """Look ``key`` up in the process-wide registry."""
    return default_registry.get(key, default)


class RenderContext:
    """
    Everything instance creation needs from outside the element itself,
    scoped to one render root.

    :param lib: Namespace of the native mapping library (``map``, ``marker``, ``tileLayer``...).
    :param registry: Where root maps and services live. Defaults to the process-wide registry.
    :param element_factory: Builds detached visual elements from a tag name.
    :param config: Settings; defaults to the ``Config`` singleton.
    """

    def __init__(
        self,
        lib: Any,
        registry: Optional[ObjectRegistry] = None,
        element_factory: Optional[Callable[[str], Any]] = None,
        config: Optional[Config] = None,
    ):
        self.lib = lib
        self.registry = registry if registry is not None else default_registry
        if element_factory is None:
            from .dom import Element
            element_factory = Element
        self.element_factory = element_factory
        self.config = config or Config()

    @property
    def renderer_key(self) -> str:
        return self.config.get("content_renderer_key")

    def register_content_renderer(self, renderer: Optional[ContentRenderer]) -> None:
        self.registry.add(self.renderer_key, renderer)

    @property
    def content_renderer(self) -> Optional[ContentRenderer]:
        return self.registry.get(self.renderer_key)

    def map_for(self, container: Any) -> Any:
        """The native map that was mounted into ``container``, if any."""
        return self.registry.get(container)

    def create_element(self, tag: str) -> Any:
        return self.element_factory(tag)
