from __future__ import annotations

"""Chord catalog: named chord types and their pitch-class intervals."""

from enum import Enum
from typing import Dict, List, Tuple

from .note_utils import transpose


class ChordType(Enum):
    MAJOR = "Major"
    MINOR = "Minor"
    DOMINANT_7 = "Dominant 7"
    MINOR_7 = "Minor 7"
    MAJOR_7 = "Major 7"
    DIMINISHED = "Diminished"
    AUGMENTED = "Augmented"
    SUS2 = "Sus2"
    SUS4 = "Sus4"


CHORD_INTERVALS: Dict[ChordType, Tuple[int, ...]] = {
    ChordType.MAJOR: (0, 4, 7),
    ChordType.MINOR: (0, 3, 7),
    ChordType.DOMINANT_7: (0, 4, 7, 10),
    ChordType.MINOR_7: (0, 3, 7, 10),
    ChordType.MAJOR_7: (0, 4, 7, 11),
    ChordType.DIMINISHED: (0, 3, 6),
    ChordType.AUGMENTED: (0, 4, 8),
    ChordType.SUS2: (0, 2, 7),
    ChordType.SUS4: (0, 5, 7),
}


def chord_intervals(chord: ChordType) -> Tuple[int, ...]:
    return CHORD_INTERVALS[chord]


def chord_notes(root: str, chord: ChordType) -> List[str]:
    """Absolute chord tones in interval order, e.g. A Major -> [A, C#, E]."""
    return [transpose(root, i) for i in chord_intervals(chord)]


def _check_table(table: Dict[ChordType, Tuple[int, ...]]) -> None:
    missing = [c.value for c in ChordType if c not in table]
    if missing:
        raise ValueError(f"No intervals for: {', '.join(missing)}")
    for chord, ivs in table.items():
        if not ivs or ivs[0] != 0:
            raise ValueError(f"{chord.value} must start at the root")
        if not all(0 <= i <= 11 for i in ivs):
            raise ValueError(f"{chord.value} has an interval outside 0..11")


_check_table(CHORD_INTERVALS)
