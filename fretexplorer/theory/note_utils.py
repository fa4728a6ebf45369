# fretexplorer/theory/note_utils.py
from __future__ import annotations
from typing import Dict, List

PITCH_CLASS_NAMES_SHARP: List[str] = ["C","C#","D","D#","E","F","F#","G","G#","A","A#","B"]
NAME_TO_PC: Dict[str, int] = {
    "C":0,"B#":0, "C#":1,"Db":1, "D":2,"D#":3,"Eb":3, "E":4,"Fb":4,
    "F":5,"E#":5, "F#":6,"Gb":6, "G":7,"G#":8,"Ab":8, "A":9,"A#":10,"Bb":10, "B":11,"Cb":11
}

# Roots offered to the user; sharps only ever appear as derived notes.
ROOT_NOTES: List[str] = ["A", "B", "C", "D", "E", "F", "G"]

PITCH_CLASS_COUNT = 12


def index_of(name: str) -> int:
    """Pitch-class index 0..11 for a note name (flats accepted)."""
    try:
        return NAME_TO_PC[name]
    except KeyError:
        raise ValueError(f"Unsupported note name: {name}") from None


def pc_name(index: int) -> str:
    return PITCH_CLASS_NAMES_SHARP[index % PITCH_CLASS_COUNT]


def transpose(name: str, interval: int) -> str:
    """Move a pitch class by any number of semitones, up or down."""
    return pc_name(index_of(name) + interval)


def interval_between(root: str, note: str) -> int:
    """Ascending semitone distance from root to note, in 0..11."""
    return (index_of(note) - index_of(root)) % PITCH_CLASS_COUNT


def normalize_name(name: str) -> str:
    return pc_name(index_of(name))
