from __future__ import annotations

"""Scale catalog for 12-TET.

Each scale carries its interval set from the tonic and, in parallel, the
name of the mode that starts on each of its degrees.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .note_utils import interval_between, transpose


class ScaleType(Enum):
    MAJOR = "Major (Ionian)"
    NATURAL_MINOR = "Natural Minor (Aeolian)"
    PENTATONIC_MAJOR = "Pentatonic Major"
    PENTATONIC_MINOR = "Pentatonic Minor"
    BLUES = "Blues"
    DORIAN = "Dorian"
    MIXOLYDIAN = "Mixolydian"


@dataclass(frozen=True)
class ScaleDef:
    intervals: Tuple[int, ...]
    modes: Tuple[str, ...]

    def position_of(self, interval: int) -> Optional[int]:
        """0-based index of an interval within the scale, or None."""
        try:
            return self.intervals.index(interval % 12)
        except ValueError:
            return None


_DIATONIC_MODES = ("Ionian", "Dorian", "Phrygian", "Lydian", "Mixolydian", "Aeolian", "Locrian")
_PENTATONIC_MODES = ("Major Pentatonic", "Egyptian", "Blues Minor", "Blues Major", "Minor Pentatonic")


def _rotate(names: Tuple[str, ...], start: str) -> Tuple[str, ...]:
    i = names.index(start)
    return names[i:] + names[:i]


SCALE_DEFS: Dict[ScaleType, ScaleDef] = {
    ScaleType.MAJOR: ScaleDef((0, 2, 4, 5, 7, 9, 11), _DIATONIC_MODES),
    ScaleType.NATURAL_MINOR: ScaleDef((0, 2, 3, 5, 7, 8, 10), _rotate(_DIATONIC_MODES, "Aeolian")),
    ScaleType.PENTATONIC_MAJOR: ScaleDef((0, 2, 4, 7, 9), _PENTATONIC_MODES),
    ScaleType.PENTATONIC_MINOR: ScaleDef((0, 3, 5, 7, 10), _rotate(_PENTATONIC_MODES, "Minor Pentatonic")),
    ScaleType.BLUES: ScaleDef(
        (0, 3, 5, 6, 7, 10),
        ("Blues", "Blues #2", "Blues #3", "Blues #4", "Blues #5", "Blues #6"),
    ),
    ScaleType.DORIAN: ScaleDef((0, 2, 3, 5, 7, 9, 10), _rotate(_DIATONIC_MODES, "Dorian")),
    ScaleType.MIXOLYDIAN: ScaleDef((0, 2, 4, 5, 7, 9, 10), _rotate(_DIATONIC_MODES, "Mixolydian")),
}


def scale_def(scale: ScaleType) -> ScaleDef:
    return SCALE_DEFS[scale]


def scale_notes(root: str, scale: ScaleType) -> List[str]:
    """Absolute scale tones in degree order.

    Args:
        root: Tonic pitch-class name.
        scale: Catalog scale.

    Returns:
        One note name per scale degree, starting with the tonic.
    """
    return [transpose(root, i) for i in scale_def(scale).intervals]


def degree_position(root: str, note: str, scale: ScaleType) -> Optional[int]:
    """0-based degree index of note in the scale built on root, or None."""
    return scale_def(scale).position_of(interval_between(root, note))


def _check_table(table: Dict[ScaleType, ScaleDef]) -> None:
    missing = [s.value for s in ScaleType if s not in table]
    if missing:
        raise ValueError(f"No definition for: {', '.join(missing)}")
    for scale, sd in table.items():
        if len(sd.intervals) != len(sd.modes):
            raise ValueError(f"{scale.value}: one mode name per degree")
        if not sd.intervals or sd.intervals[0] != 0:
            raise ValueError(f"{scale.value} must start at the tonic")
        if list(sd.intervals) != sorted(set(sd.intervals)) or sd.intervals[-1] > 11:
            raise ValueError(f"{scale.value} must ascend without repeats within 0..11")


_check_table(SCALE_DEFS)
