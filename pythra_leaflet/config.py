# pythra_leaflet/config.py
from __future__ import annotations
import copy
import importlib
from pathlib import Path
from typing import Any, Dict, Optional
import yaml


LEAFLET_CDN = "https://unpkg.com/leaflet@1.9.4/dist/images"

DEFAULTS: Dict[str, Any] = {
    # tags starting with this prefix belong to the bridge
    "reserved_prefix": "lf",
    "handler_prefix": "on",
    "setter_prefix": "set",
    # registry key of the content-rendering service
    "content_renderer_key": "jsxRenderer",
    # tag of the detached element popups and tooltips render into
    "content_tag": "section",
    "min_container_px": 10,
    "marker_icon_url": f"{LEAFLET_CDN}/marker-icon.png",
    "marker_shadow_url": f"{LEAFLET_CDN}/marker-shadow.png",
    "verbose": False,
}


class Config:
    """
    Singleton settings loader for the bridge.

    Values come from, in order of preference:
      - an embedded module (default name: _embedded_leaflet_config, attribute: CONFIG)
      - a YAML file (default: leaflet.yaml)
    and are laid over ``DEFAULTS``, so every key in ``DEFAULTS`` is always present.

    Usage:
        cfg = Config()
        prefix = cfg.get("reserved_prefix")
        threshold = cfg.get_nested("sizing.min_px", 10)
        cfg.reload()    # re-read embedded/file (useful in dev)

    Parameters:
      config_file: path to the YAML file (relative or absolute).
      prefer_embedded: when True (default) try the embedded module first.
      embedded_module_name: module to import when looking for embedded config.
    """

    _instance: Optional["Config"] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(
        self,
        config_file: str = "leaflet.yaml",
        prefer_embedded: bool = True,
        embedded_module_name: str = "_embedded_leaflet_config",
    ):
        # initialize only once
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self.config_file_arg = config_file
        self.prefer_embedded = bool(prefer_embedded)
        self.embedded_module_name = embedded_module_name

        self._config: Dict[str, Any] = copy.deepcopy(DEFAULTS)
        self._source: Optional[str] = None  # 'embedded' or 'file' or None
        self._resolved_config_path: Optional[Path] = self._resolve_config_path(config_file)

        self.reload()

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next ``Config()`` starts from scratch."""
        cls._instance = None

    # ----- public API -----
    def reload(self, prefer_embedded: Optional[bool] = None) -> None:
        """
        Reload the configuration. If prefer_embedded is provided, it overrides the
        instance preference just for this reload.
        """
        prefer = self.prefer_embedded if prefer_embedded is None else bool(prefer_embedded)

        self._config = copy.deepcopy(DEFAULTS)
        if prefer:
            loaded = self._try_load_embedded() or self._try_load_file()
        else:
            loaded = self._try_load_file() or self._try_load_embedded()

        if not loaded:
            self._source = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the effective configuration (defaults included)."""
        return dict(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Shallow lookup in the top-level config dict."""
        return self._config.get(key, default)

    def get_nested(self, path: str, default: Any = None, sep: str = ".") -> Any:
        """
        Lookup nested keys using dot-path (e.g. "sizing.min_px").
        Returns default if any step is missing.
        """
        cur = self._config
        if not path:
            return default
        for part in path.split(sep):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur

    def set(self, key: str, value: Any) -> None:
        """Override a single value at runtime (not persisted)."""
        self._config[key] = value

    @property
    def is_embedded(self) -> bool:
        return self._source == "embedded"

    @property
    def source(self) -> Optional[str]:
        """Return 'embedded'|'file'|None depending on where overrides came from."""
        return self._source

    @property
    def resolved_config_path(self) -> Optional[Path]:
        return self._resolved_config_path

    # ----- internal helpers -----
    def _resolve_config_path(self, config_file: str) -> Optional[Path]:
        """
        Resolve the YAML path: absolute path, then the project root (parent of this
        package), then the current working directory.
        """
        candidate = Path(config_file)
        if candidate.is_absolute():
            return candidate.resolve() if candidate.exists() else None

        project_root = Path(__file__).resolve().parent.parent
        for base in (project_root, Path.cwd()):
            path = (base / config_file).resolve()
            if path.exists():
                return path
        return None

    def _merge(self, data: Dict[str, Any]) -> None:
        for key, value in data.items():
            if isinstance(value, dict) and isinstance(self._config.get(key), dict):
                self._config[key] = {**self._config[key], **value}
            else:
                self._config[key] = value

    def _try_load_embedded(self) -> bool:
        """Import the embedded module and merge its CONFIG. Returns True on success."""
        try:
            module = importlib.import_module(self.embedded_module_name)
        except ModuleNotFoundError:
            return False

        cfg = getattr(module, "CONFIG", None)
        if not isinstance(cfg, dict):
            print(f"[Config] {self.embedded_module_name}.CONFIG is not a dict, ignoring it")
            return False
        self._merge(cfg)
        self._source = "embedded"
        return True

    def _try_load_file(self) -> bool:
        """Load the YAML file from the resolved path. Returns True on success."""
        if not self._resolved_config_path:
            return False
        with self._resolved_config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            print(f"[Config] {self._resolved_config_path} does not hold a mapping, ignoring it")
            return False
        self._merge(data)
        self._source = "file"
        if self._config.get("verbose"):
            print(f"[Config] loaded {self._resolved_config_path}")
        return True


def get_config(*args, **kwargs) -> Config:
    """
    Convenience factory that returns the singleton Config instance.
    Arguments forwarded to Config() only on the first call.
    """
    return Config(*args, **kwargs)
