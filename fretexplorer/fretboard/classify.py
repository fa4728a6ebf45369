from __future__ import annotations

"""Note classification: scale degree/mode labels and display categories."""

from enum import Enum
from typing import NamedTuple, Optional, TYPE_CHECKING

from ..theory.scales import ScaleType, degree_position, scale_def

if TYPE_CHECKING:  # pragma: no cover
    from ..app.selection import Toggles
    from .generator import FretboardCell


class ScaleDegree(NamedTuple):
    degree: int   # 1-based
    mode: str


def classify_note(note: str, root: Optional[str], scale: Optional[ScaleType]) -> Optional[ScaleDegree]:
    """Scale degree and mode name of note in the scale built on root.

    Args:
        note: Pitch-class name of the sounding note.
        root: Selected tonic, or None.
        scale: Selected scale, or None.

    Returns:
        ScaleDegree for scale tones; None when root or scale is unset or
        the note lies outside the scale.
    """
    if root is None or scale is None:
        return None
    pos = degree_position(root, note, scale)
    if pos is None:
        return None
    return ScaleDegree(pos + 1, scale_def(scale).modes[pos])


class DisplayCategory(Enum):
    HIDDEN = "hidden"
    ROOT = "root"
    CHORD_AND_SCALE = "chord+scale"
    CHORD = "chord"
    SCALE = "scale"


def display_category(cell: "FretboardCell", toggles: "Toggles") -> DisplayCategory:
    """Pick the visual category for a cell.

    Precedence is root > chord+scale > chord > scale; a category only wins
    when its toggles are on, otherwise the next one is tried.
    """
    if cell.is_root and toggles.show_root:
        return DisplayCategory.ROOT
    if cell.is_chord_tone and cell.is_scale_tone and toggles.show_chord and toggles.show_scale:
        return DisplayCategory.CHORD_AND_SCALE
    if cell.is_chord_tone and toggles.show_chord:
        return DisplayCategory.CHORD
    if cell.is_scale_tone and toggles.show_scale:
        return DisplayCategory.SCALE
    return DisplayCategory.HIDDEN
