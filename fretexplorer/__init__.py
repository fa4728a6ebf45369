"""Fretboard Explorer package initialization.

Exposes the fretboard generator and selection model at the top level so
rendering code and notebooks can simply `import fretexplorer`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .app.selection import Selection, Toggles
from .fretboard.classify import DisplayCategory, classify_note, display_category
from .fretboard.generator import FretboardCell, generate_fretboard
from .fretboard.tuning import STANDARD_TUNING, Tuning
from .theory.catalog import InvalidCatalogKey
from .theory.chords import ChordType
from .theory.scales import ScaleType

__all__ = [
    "__version__",
    "Selection",
    "Toggles",
    "DisplayCategory",
    "classify_note",
    "display_category",
    "FretboardCell",
    "generate_fretboard",
    "STANDARD_TUNING",
    "Tuning",
    "InvalidCatalogKey",
    "ChordType",
    "ScaleType",
]
