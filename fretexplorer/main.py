from __future__ import annotations

"""CLI entry point for Fretboard Explorer."""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from . import __version__
from .app import explain
from .app.selection import Selection, Toggles, normalize_root
from .app.summary import format_summary, render_text
from .config.config import load_config, selection_from_config, validate_config
from .fretboard.generator import generate_fretboard
from .fretboard.tuning import MAX_FRETS, get_tuning
from .storage.store import export_csv, grid_to_frame
from .theory.catalog import InvalidCatalogKey, list_chords, list_scales
from .theory.note_utils import ROOT_NOTES


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fretboard Explorer CLI")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--root", type=str, default=None, help=f"Root note ({' '.join(ROOT_NOTES)} or none)")
    p.add_argument("--chord", type=str, default=None, help="Chord type, e.g. 'Major 7' or none")
    p.add_argument("--scale", type=str, default=None, help="Scale type, e.g. 'Major (Ionian)' or none")
    p.add_argument("--frets", type=int, default=None, help="Highest fret to show")
    p.add_argument("--hide-root", action="store_true", help="Do not highlight root notes")
    p.add_argument("--hide-chord", action="store_true", help="Do not highlight chord tones")
    p.add_argument("--hide-scale", action="store_true", help="Do not highlight scale tones")
    p.add_argument("--export", type=str, default=None, help="Write the annotated grid to CSV")
    p.add_argument("--list", action="store_true", help="List chord and scale types and exit")
    p.add_argument("--explain", action="store_true", help="Trace fretboard generation")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def _print_catalog() -> None:
    print("Roots: " + " ".join(ROOT_NOTES))
    print("Chords: " + ", ".join(c.value for c in list_chords()))
    print("Scales: " + ", ".join(s.value for s in list_scales()))


def _apply_overrides(base: Selection, args: argparse.Namespace) -> Selection:
    sel = base
    if args.root is not None:
        sel = sel.with_root(normalize_root(args.root))
    if args.chord is not None:
        sel = sel.with_chord(args.chord)
    if args.scale is not None:
        sel = sel.with_scale(args.scale)
    t = sel.toggles
    return replace(
        sel,
        toggles=Toggles(
            show_root=t.show_root and not args.hide_root,
            show_chord=t.show_chord and not args.hide_chord,
            show_scale=t.show_scale and not args.hide_scale,
        ),
    )


def cli(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"fretexplorer {__version__}")
        return 0
    if args.list:
        _print_catalog()
        return 0

    explain.enable(args.explain)

    cfg = validate_config(load_config(args.config))
    board_cfg = cfg["fretboard"]
    tuning = get_tuning(board_cfg["tuning"])
    frets = board_cfg["frets"] if args.frets is None else args.frets

    if not 0 <= frets <= MAX_FRETS:
        print(f"ERROR: --frets must be between 0 and {MAX_FRETS}", file=sys.stderr)
        return 2

    try:
        selection = _apply_overrides(selection_from_config(cfg), args)
        explain.trace("selection", {"root": selection.root, "chord": selection.chord, "scale": selection.scale})
        grid = generate_fretboard(tuning, frets, selection)
    except InvalidCatalogKey as e:
        print(f"ERROR: {e}. Use --list to see the available names.", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    summary = format_summary(selection)
    if summary:
        print(summary)
        print()
    elif selection.root is None:
        print("No root selected; nothing is highlighted.")
        print()
    print(render_text(grid, tuning, selection.toggles))

    if args.export:
        path = export_csv(grid_to_frame(grid, selection.toggles), args.export)
        print(f"\nWrote {sum(len(r) for r in grid)} cells to {path}")
    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
