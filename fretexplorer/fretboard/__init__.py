"""Fretboard model: tuning, grid generation and note classification."""

from .tuning import DEFAULT_FRETS, STANDARD_TUNING, Tuning  # noqa: F401
from .generator import FretboardCell, fret_marker_count, generate_fretboard, note_at_fret  # noqa: F401
from .classify import DisplayCategory, ScaleDegree, classify_note, display_category  # noqa: F401
