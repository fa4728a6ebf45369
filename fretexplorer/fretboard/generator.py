from __future__ import annotations

"""Fretboard generation.

Maps every (string, fret) position to its sounding pitch class and flags it
against the current selection. The result is a plain grid of immutable
cells; nothing here knows about rendering.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from ..app import explain
from ..app.selection import Selection
from ..theory.chords import chord_notes
from ..theory.note_utils import transpose
from ..theory.scales import scale_notes
from .classify import classify_note
from .tuning import DEFAULT_FRETS, STANDARD_TUNING, Tuning

_MARKER_FRETS = {3, 5, 7, 9}


@dataclass(frozen=True)
class FretboardCell:
    note: str
    string: int
    fret: int
    is_root: bool = False
    is_chord_tone: bool = False
    is_scale_tone: bool = False
    scale_degree: Optional[int] = None
    mode: Optional[str] = None


FretboardGrid = List[List[FretboardCell]]


def note_at_fret(tuning: Tuning, string: int, fret: int) -> str:
    return transpose(tuning.open_note(string), fret)


def selected_chord_notes(selection: Selection) -> FrozenSet[str]:
    if selection.root is None or selection.chord is None:
        return frozenset()
    return frozenset(chord_notes(selection.root, selection.chord))


def selected_scale_notes(selection: Selection) -> FrozenSet[str]:
    if selection.root is None or selection.scale is None:
        return frozenset()
    return frozenset(scale_notes(selection.root, selection.scale))


def _make_cell(
    note: str,
    string: int,
    fret: int,
    selection: Selection,
    chord_set: FrozenSet[str],
    scale_set: FrozenSet[str],
) -> FretboardCell:
    is_scale = note in scale_set
    degree = None
    mode = None
    if is_scale:
        label = classify_note(note, selection.root, selection.scale)
        if label is None:
            # membership and degree lookup share one interval list
            raise RuntimeError(f"{note} is in the scale set but has no degree")
        degree, mode = label
    return FretboardCell(
        note=note,
        string=string,
        fret=fret,
        is_root=selection.root is not None and note == selection.root,
        is_chord_tone=note in chord_set,
        is_scale_tone=is_scale,
        scale_degree=degree,
        mode=mode,
    )


def generate_fretboard(
    tuning: Tuning = STANDARD_TUNING,
    fret_count: int = DEFAULT_FRETS,
    selection: Selection | None = None,
) -> FretboardGrid:
    """Build the annotated grid, one row per string, frets 0..fret_count.

    Args:
        tuning: Open strings in display order.
        fret_count: Highest fret to include (inclusive).
        selection: Snapshot to annotate against; defaults to a fresh Selection.

    Returns:
        A list of rows (strings), each a list of FretboardCell.
    """
    if isinstance(fret_count, bool) or not isinstance(fret_count, int) or fret_count < 0:
        raise ValueError(f"fret_count must be a non-negative integer, got {fret_count!r}")
    if selection is None:
        selection = Selection()

    chord_set = selected_chord_notes(selection)
    scale_set = selected_scale_notes(selection)

    grid: FretboardGrid = []
    for s in range(len(tuning)):
        row = [
            _make_cell(note_at_fret(tuning, s, f), s, f, selection, chord_set, scale_set)
            for f in range(fret_count + 1)
        ]
        grid.append(row)

    explain.trace(
        "fretboard.generate",
        {
            "tuning": tuning.name,
            "frets": fret_count,
            "root": selection.root,
            "chord": selection.chord.value if selection.chord else None,
            "scale": selection.scale.value if selection.scale else None,
            "chord_notes": sorted(chord_set),
            "scale_notes": sorted(scale_set),
        },
    )
    return grid


def fret_marker_count(fret: int) -> int:
    """Number of inlay dots drawn under a fret (0, 1 or 2)."""
    if fret <= 0:
        return 0
    if fret % 12 == 0:
        return 2
    return 1 if fret % 12 in _MARKER_FRETS else 0
