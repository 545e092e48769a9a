# tests/test_config.py
import os
import tempfile
import unittest

from pythra_leaflet.config import DEFAULTS, Config, get_config


class TestConfig(unittest.TestCase):
    def setUp(self):
        Config.reset()
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        Config.reset()
        self.tmpdir.cleanup()

    def _write(self, text: str) -> str:
        path = os.path.join(self.tmpdir.name, "leaflet.yaml")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
        return path

    def test_defaults_without_file(self):
        cfg = Config(config_file=os.path.join(self.tmpdir.name, "absent.yaml"),
                     embedded_module_name="no_such_embedded_config")
        self.assertIsNone(cfg.source)
        self.assertEqual(cfg.get("reserved_prefix"), "lf")
        self.assertEqual(cfg.get("min_container_px"), 10)
        self.assertEqual(cfg.as_dict(), DEFAULTS)

    def test_yaml_overrides_defaults(self):
        path = self._write("min_container_px: 32\nsizing:\n  mode: fill\n")
        cfg = Config(config_file=path, embedded_module_name="no_such_embedded_config")
        self.assertEqual(cfg.source, "file")
        self.assertEqual(cfg.get("min_container_px"), 32)
        self.assertEqual(cfg.get("handler_prefix"), "on")
        self.assertEqual(cfg.get_nested("sizing.mode"), "fill")
        self.assertEqual(cfg.get_nested("sizing.missing", "x"), "x")

    def test_singleton(self):
        first = get_config(embedded_module_name="no_such_embedded_config")
        self.assertIs(Config(), first)

    def test_reload_picks_up_changes(self):
        path = self._write("verbose: false\n")
        cfg = Config(config_file=path, embedded_module_name="no_such_embedded_config")
        self._write("content_tag: div\n")
        cfg.reload()
        self.assertEqual(cfg.get("content_tag"), "div")

    def test_non_mapping_file_ignored(self):
        path = self._write("- just\n- a list\n")
        cfg = Config(config_file=path, embedded_module_name="no_such_embedded_config")
        self.assertIsNone(cfg.source)
        self.assertEqual(cfg.as_dict(), DEFAULTS)

    def test_runtime_override(self):
        cfg = Config(embedded_module_name="no_such_embedded_config")
        cfg.set("content_tag", "article")
        self.assertEqual(Config().get("content_tag"), "article")


if __name__ == "__main__":
    unittest.main()
