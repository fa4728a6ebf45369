from __future__ import annotations

"""Configuration loading and validation for Fretboard Explorer.

This module loads YAML configuration, applies defaults, and validates the
start-up selection, display toggles and fretboard size.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

try:
    import yaml  # type: ignore
except ImportError:  # pragma: no cover - dependency issues handled at runtime
    yaml = None  # type: ignore

from ..app.selection import DEFAULT_ROOT, Selection, Toggles, normalize_root
from ..fretboard.tuning import DEFAULT_FRETS, MAX_FRETS, TUNINGS
from ..theory.catalog import InvalidCatalogKey, parse_chord_type, parse_scale_type
from ..theory.note_utils import ROOT_NOTES


ALLOWED_TUNINGS = set(TUNINGS)
SECTIONS = ("selection", "display", "fretboard", "export")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if yaml is None:
        print("ERROR: pyyaml is not installed. Please install dependencies.", file=sys.stderr)
        sys.exit(1)
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _is_none(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip().lower() in ("", "none"))


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported values are replaced by their defaults with a warning, so a
    stale config file never prevents start-up.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing or empty sections
    for section in SECTIONS:
        value = cfg.get(section)
        if not isinstance(value, dict):
            if value is not None:
                print(f"WARNING: Config section '{section}' must be a mapping, using defaults.")
            cfg[section] = {}

    selection = cfg["selection"]
    display = cfg["display"]
    board = cfg["fretboard"]
    export = cfg["export"]

    # Apply section defaults
    selection.setdefault("root", DEFAULT_ROOT)
    selection.setdefault("chord", None)
    selection.setdefault("scale", None)

    display.setdefault("show_root", True)
    display.setdefault("show_chord", True)
    display.setdefault("show_scale", True)

    board.setdefault("tuning", "standard")
    board.setdefault("frets", DEFAULT_FRETS)

    export.setdefault("path", "./fretboard.csv")

    # Enum validations
    root = normalize_root(selection.get("root"))
    if root is None:
        selection["root"] = None
    elif root not in ROOT_NOTES:
        print(f"WARNING: Unsupported root '{selection.get('root')}', using '{DEFAULT_ROOT}'.")
        selection["root"] = DEFAULT_ROOT
    else:
        selection["root"] = root

    chord = selection.get("chord")
    try:
        parsed_chord = parse_chord_type(None if _is_none(chord) else str(chord))
    except InvalidCatalogKey:
        print(f"WARNING: Unsupported chord '{chord}', using none.")
        parsed_chord = None
    selection["chord"] = parsed_chord.value if parsed_chord else None

    scale = selection.get("scale")
    try:
        parsed_scale = parse_scale_type(None if _is_none(scale) else str(scale))
    except InvalidCatalogKey:
        print(f"WARNING: Unsupported scale '{scale}', using none.")
        parsed_scale = None
    selection["scale"] = parsed_scale.value if parsed_scale else None

    for key in ("show_root", "show_chord", "show_scale"):
        display[key] = bool(display.get(key))

    tuning = board.get("tuning")
    if tuning not in ALLOWED_TUNINGS:
        print(f"WARNING: Unsupported tuning '{tuning}', using 'standard'.")
        board["tuning"] = "standard"

    frets = board.get("frets")
    try:
        frets = int(frets)
    except (TypeError, ValueError):
        frets = -1
    if not 1 <= frets <= MAX_FRETS:
        print(f"WARNING: Unsupported fret count '{board.get('frets')}', using {DEFAULT_FRETS}.")
        frets = DEFAULT_FRETS
    board["frets"] = frets

    return cfg


def selection_from_config(cfg: Dict[str, Any]) -> Selection:
    """Build the start-up Selection from a validated config."""
    sel = cfg["selection"]
    disp = cfg["display"]
    return Selection(
        root=sel.get("root"),
        chord=sel.get("chord"),
        scale=sel.get("scale"),
        toggles=Toggles(
            show_root=disp["show_root"],
            show_chord=disp["show_chord"],
            show_scale=disp["show_scale"],
        ),
    )
