from __future__ import annotations

"""Human-readable views of a selection and its fretboard.

Provides the "current notes" listing, per-cell note information, and a
plain-text grid for terminals.
"""

from dataclasses import dataclass, field
from typing import List

from ..fretboard.classify import DisplayCategory, display_category
from ..fretboard.generator import FretboardCell, FretboardGrid, fret_marker_count
from ..fretboard.tuning import Tuning
from ..theory.chords import chord_notes
from ..theory.scales import scale_notes
from .selection import Selection, Toggles


@dataclass(frozen=True)
class NoteSummary:
    chord_notes: List[str] = field(default_factory=list)
    scale_notes: List[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.chord_notes and not self.scale_notes


def current_notes(selection: Selection) -> NoteSummary:
    """Chord and scale tones of the selection, in interval order."""
    if selection.root is None:
        return NoteSummary()
    chord = chord_notes(selection.root, selection.chord) if selection.chord else []
    scale = scale_notes(selection.root, selection.scale) if selection.scale else []
    return NoteSummary(chord_notes=chord, scale_notes=scale)


def format_summary(selection: Selection) -> str:
    """Return the current-notes block, or an empty string if nothing is selected."""
    notes = current_notes(selection)
    lines = []
    if notes.chord_notes:
        lines.append(f"Chord ({selection.root} {selection.chord.value}): {' '.join(notes.chord_notes)}")  # type: ignore[union-attr]
    if notes.scale_notes:
        lines.append(f"Scale ({selection.root} {selection.scale.value}): {' '.join(notes.scale_notes)}")  # type: ignore[union-attr]
    return "\n".join(lines)


def describe_cell(cell: FretboardCell, tuning: Tuning, selection: Selection) -> List[str]:
    """Note information for a single position.

    Only chord and scale tones have anything to say; other cells yield an
    empty list.
    """
    if not (cell.is_scale_tone or cell.is_chord_tone):
        return []
    lines = [f"Note: {cell.note}  Fret: {cell.fret}  String: {tuning.open_note(cell.string)}"]
    if cell.is_scale_tone and cell.scale_degree:
        lines.append(f"Scale Position: {cell.scale_degree}")
        if cell.mode:
            lines.append(f"Mode: {cell.mode}")
    if cell.is_chord_tone and selection.chord is not None:
        lines.append(f"Chord Note: Part of {selection.root} {selection.chord.value}")
    if cell.is_root:
        lines.append("Root Note")
    return lines


_DECORATION = {
    DisplayCategory.ROOT: "({})",
    DisplayCategory.CHORD_AND_SCALE: "[{}]",
    DisplayCategory.CHORD: "<{}>",
    DisplayCategory.SCALE: " {} ",
}

_CELL_WIDTH = 5


def _render_cell(cell: FretboardCell, toggles: Toggles) -> str:
    cat = display_category(cell, toggles)
    if cat is DisplayCategory.HIDDEN:
        return "-".center(_CELL_WIDTH)
    return _DECORATION[cat].format(cell.note).center(_CELL_WIDTH)


def render_text(grid: FretboardGrid, tuning: Tuning, toggles: Toggles) -> str:
    """Render the grid as fixed-width text.

    Root notes are shown as (A), chord+scale tones as [C#], chord tones as
    <E> and scale-only tones bare. A dot row under the board marks inlays.
    """
    if not grid:
        return ""
    frets = len(grid[0])
    header = " " * 5 + "".join(str(f).center(_CELL_WIDTH) for f in range(frets))
    rows = [header]
    for s, row in enumerate(grid):
        label = tuning.open_note(s).rjust(2) + " |"
        rows.append(label + " " + "".join(_render_cell(c, toggles) for c in row))
    dots = " " * 5 + "".join(("." * fret_marker_count(f)).center(_CELL_WIDTH) for f in range(frets))
    rows.append(dots.rstrip())
    return "\n".join(rows)
