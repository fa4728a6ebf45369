"""Music-theory layer: pitch classes, chord and scale catalogs."""

from .note_utils import PITCH_CLASS_NAMES_SHARP, ROOT_NOTES, index_of, interval_between, pc_name, transpose  # noqa: F401
from .chords import ChordType, chord_intervals, chord_notes  # noqa: F401
from .scales import ScaleDef, ScaleType, scale_def, scale_notes  # noqa: F401
from .catalog import InvalidCatalogKey, list_chords, list_scales, parse_chord_type, parse_scale_type  # noqa: F401
