from __future__ import annotations

"""User selection snapshot: root, chord, scale and visibility toggles.

Selections are immutable; every change produces a new snapshot so a
fretboard generated from one can never observe a later edit.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from ..theory.catalog import parse_chord_type, parse_scale_type
from ..theory.chords import ChordType
from ..theory.note_utils import ROOT_NOTES
from ..theory.scales import ScaleType

DEFAULT_ROOT = "A"

_TOGGLE_FIELDS = {"root": "show_root", "chord": "show_chord", "scale": "show_scale"}


@dataclass(frozen=True)
class Toggles:
    show_root: bool = True
    show_chord: bool = True
    show_scale: bool = True

    def flipped(self, category: str) -> "Toggles":
        """Return a copy with one of "root"/"chord"/"scale" inverted."""
        name = _TOGGLE_FIELDS.get(category)
        if name is None:
            raise ValueError(f"Unknown toggle: {category}")
        return replace(self, **{name: not getattr(self, name)})


def normalize_root(value: Optional[str]) -> Optional[str]:
    """Upper-case a root label; "none" or blank mean no root."""
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in ("", "none"):
        return None
    return text.upper()


def _check_root(root: Optional[str]) -> Optional[str]:
    if root is None:
        return None
    if root not in ROOT_NOTES:
        raise ValueError(f"Root must be one of {', '.join(ROOT_NOTES)}: {root!r}")
    return root


@dataclass(frozen=True)
class Selection:
    root: Optional[str] = DEFAULT_ROOT
    chord: Optional[ChordType] = None
    scale: Optional[ScaleType] = None
    toggles: Toggles = field(default_factory=Toggles)

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        _check_root(self.root)
        object.__setattr__(self, "chord", parse_chord_type(self.chord))
        object.__setattr__(self, "scale", parse_scale_type(self.scale))

    @property
    def has_root(self) -> bool:
        return self.root is not None

    def with_root(self, root: Optional[str]) -> "Selection":
        return replace(self, root=root)

    def with_chord(self, chord: Union[ChordType, str, None]) -> "Selection":
        return replace(self, chord=chord)

    def with_scale(self, scale: Union[ScaleType, str, None]) -> "Selection":
        return replace(self, scale=scale)

    def toggle(self, category: str) -> "Selection":
        return replace(self, toggles=self.toggles.flipped(category))
