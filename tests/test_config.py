import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from fretexplorer.app.selection import normalize_root
from fretexplorer.config.config import load_config, selection_from_config, validate_config
from fretexplorer.theory.chords import ChordType
from fretexplorer.theory.scales import ScaleType


class ConfigTests(unittest.TestCase):
    def _validate(self, cfg):
        buf = io.StringIO()
        with redirect_stdout(buf):
            out = validate_config(cfg)
        return out, buf.getvalue()

    def test_package_defaults(self) -> None:
        cfg, warnings = self._validate(load_config())
        self.assertEqual(warnings, "")
        self.assertEqual(cfg["selection"], {"root": "A", "chord": None, "scale": None})
        self.assertEqual(cfg["fretboard"], {"tuning": "standard", "frets": 12})
        self.assertTrue(all(cfg["display"].values()))

    def test_empty_config_gets_defaults(self) -> None:
        cfg, _ = self._validate({})
        self.assertEqual(cfg["selection"]["root"], "A")
        self.assertEqual(cfg["fretboard"]["frets"], 12)
        self.assertEqual(cfg["export"]["path"], "./fretboard.csv")

    def test_unsupported_values_fall_back_with_warning(self) -> None:
        cfg, warnings = self._validate(
            {
                "selection": {"root": "H", "chord": "Major 13", "scale": "Bebop"},
                "fretboard": {"tuning": "drop_d", "frets": 40},
            }
        )
        self.assertEqual(cfg["selection"], {"root": "A", "chord": None, "scale": None})
        self.assertEqual(cfg["fretboard"], {"tuning": "standard", "frets": 12})
        for word in ("root", "chord", "scale", "tuning", "fret count"):
            self.assertIn(f"WARNING: Unsupported {word}", warnings)

    def test_names_are_normalised(self) -> None:
        cfg, _ = self._validate({"selection": {"root": "none", "chord": "major7", "scale": "aeolian"}})
        self.assertEqual(cfg["selection"], {"root": None, "chord": "Major 7", "scale": "Natural Minor (Aeolian)"})

    def test_non_numeric_frets(self) -> None:
        cfg, warnings = self._validate({"fretboard": {"frets": "lots"}})
        self.assertEqual(cfg["fretboard"]["frets"], 12)
        self.assertIn("fret count", warnings)

    def test_blank_sections_get_defaults_silently(self) -> None:
        cfg, warnings = self._validate({"selection": None, "display": None, "fretboard": None, "export": None})
        self.assertEqual(warnings, "")
        self.assertEqual(cfg["selection"], {"root": "A", "chord": None, "scale": None})
        self.assertTrue(all(cfg["display"].values()))
        self.assertEqual(cfg["fretboard"], {"tuning": "standard", "frets": 12})

    def test_non_mapping_section_warns(self) -> None:
        cfg, warnings = self._validate({"display": "yes", "fretboard": [24]})
        self.assertIn("WARNING: Config section 'display' must be a mapping", warnings)
        self.assertIn("WARNING: Config section 'fretboard' must be a mapping", warnings)
        self.assertTrue(all(cfg["display"].values()))
        self.assertEqual(cfg["fretboard"]["frets"], 12)

    def test_root_case_is_normalised(self) -> None:
        cfg, warnings = self._validate({"selection": {"root": " c "}})
        self.assertEqual(warnings, "")
        self.assertEqual(cfg["selection"]["root"], "C")
        cfg, _ = self._validate({"selection": {"root": "None"}})
        self.assertIsNone(cfg["selection"]["root"])

    def test_normalize_root(self) -> None:
        self.assertEqual(normalize_root("g"), "G")
        self.assertEqual(normalize_root(" A "), "A")
        self.assertIsNone(normalize_root("none"))
        self.assertIsNone(normalize_root(""))
        self.assertIsNone(normalize_root(None))
        self.assertEqual(normalize_root("h"), "H")

    def test_selection_from_config(self) -> None:
        cfg, _ = self._validate(
            {
                "selection": {"root": "C", "chord": "Minor", "scale": "Dorian"},
                "display": {"show_scale": False},
            }
        )
        sel = selection_from_config(cfg)
        self.assertEqual(sel.root, "C")
        self.assertIs(sel.chord, ChordType.MINOR)
        self.assertIs(sel.scale, ScaleType.DORIAN)
        self.assertFalse(sel.toggles.show_scale)
        self.assertTrue(sel.toggles.show_root)

    def test_load_yaml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("selection:\n  root: G\nfretboard:\n  frets: 5\n", encoding="utf-8")
            cfg, _ = self._validate(load_config(str(path)))
        self.assertEqual(cfg["selection"]["root"], "G")
        self.assertEqual(cfg["fretboard"]["frets"], 5)

    def test_missing_file_exits(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                load_config("/nonexistent/fretexplorer.yml")
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
