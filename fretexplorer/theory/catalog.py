from __future__ import annotations

"""Catalog lookups by name.

The presentation layer passes option labels ("Major 7", "none", ...); these
helpers turn them into catalog members and reject anything the catalog does
not enumerate.
"""

from typing import Dict, List, Optional, Union

from .chords import ChordType
from .scales import ScaleType


class InvalidCatalogKey(KeyError):
    """A chord or scale name that the catalog does not define."""

    def __init__(self, kind: str, name: object) -> None:
        super().__init__(f"Unknown {kind}: {name!r}")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


NONE_LABEL = "none"


def _normalize_key(value: str) -> str:
    t = value.strip().lower()
    for ch in " -_()":
        t = t.replace(ch, "")
    return t


_CHORD_ALIASES: Dict[str, ChordType] = {
    "maj": ChordType.MAJOR,
    "min": ChordType.MINOR,
    "dom7": ChordType.DOMINANT_7,
    "7": ChordType.DOMINANT_7,
    "min7": ChordType.MINOR_7,
    "maj7": ChordType.MAJOR_7,
    "dim": ChordType.DIMINISHED,
    "aug": ChordType.AUGMENTED,
}

_SCALE_ALIASES: Dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "ionian": ScaleType.MAJOR,
    "minor": ScaleType.NATURAL_MINOR,
    "naturalminor": ScaleType.NATURAL_MINOR,
    "aeolian": ScaleType.NATURAL_MINOR,
    "pentatonic": ScaleType.PENTATONIC_MAJOR,
    "majorpentatonic": ScaleType.PENTATONIC_MAJOR,
    "minorpentatonic": ScaleType.PENTATONIC_MINOR,
}

_CHORD_LOOKUP: Dict[str, ChordType] = {_normalize_key(c.value): c for c in ChordType}
_CHORD_LOOKUP.update({_normalize_key(c.name): c for c in ChordType})
_CHORD_LOOKUP.update(_CHORD_ALIASES)

_SCALE_LOOKUP: Dict[str, ScaleType] = {_normalize_key(s.value): s for s in ScaleType}
_SCALE_LOOKUP.update({_normalize_key(s.name): s for s in ScaleType})
_SCALE_LOOKUP.update(_SCALE_ALIASES)


def parse_chord_type(value: Union[ChordType, str, None]) -> Optional[ChordType]:
    """Resolve a chord option to a ChordType; "none"/None mean no chord."""
    if value is None or isinstance(value, ChordType):
        return value
    if not isinstance(value, str):
        raise InvalidCatalogKey("chord", value)
    key = _normalize_key(value)
    if key == NONE_LABEL:
        return None
    try:
        return _CHORD_LOOKUP[key]
    except KeyError:
        raise InvalidCatalogKey("chord", value) from None


def parse_scale_type(value: Union[ScaleType, str, None]) -> Optional[ScaleType]:
    """Resolve a scale option to a ScaleType; "none"/None mean no scale."""
    if value is None or isinstance(value, ScaleType):
        return value
    if not isinstance(value, str):
        raise InvalidCatalogKey("scale", value)
    key = _normalize_key(value)
    if key == NONE_LABEL:
        return None
    try:
        return _SCALE_LOOKUP[key]
    except KeyError:
        raise InvalidCatalogKey("scale", value) from None


def list_chords() -> List[ChordType]:
    return list(ChordType)


def list_scales() -> List[ScaleType]:
    return list(ScaleType)
