from __future__ import annotations

"""Tuning model: the open pitch class of each string.

Strings are listed in display order, top row first, so standard tuning
reads high E down to low E.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from ..theory.note_utils import index_of

STRING_COUNT = 6
DEFAULT_FRETS = 12
MAX_FRETS = 24


@dataclass(frozen=True)
class Tuning:
    name: str
    strings: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.strings) != STRING_COUNT:
            raise ValueError(f"Tuning needs {STRING_COUNT} strings, got {len(self.strings)}")
        for s in self.strings:
            index_of(s)  # raises ValueError for unknown names

    def open_note(self, string: int) -> str:
        return self.strings[string]

    def __len__(self) -> int:
        return len(self.strings)


STANDARD_TUNING = Tuning("Standard (E A D G B E)", ("E", "B", "G", "D", "A", "E"))

TUNINGS: Dict[str, Tuning] = {"standard": STANDARD_TUNING}


def get_tuning(key: str) -> Tuning:
    try:
        return TUNINGS[key]
    except KeyError:
        raise ValueError(f"Unsupported tuning: {key}") from None
