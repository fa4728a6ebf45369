import unittest

from fretexplorer.theory.catalog import (
    InvalidCatalogKey,
    list_chords,
    list_scales,
    parse_chord_type,
    parse_scale_type,
)
from fretexplorer.theory.chords import CHORD_INTERVALS, ChordType, chord_intervals, chord_notes
from fretexplorer.theory.chords import _check_table as check_chords
from fretexplorer.theory.note_utils import (
    PITCH_CLASS_NAMES_SHARP,
    index_of,
    interval_between,
    normalize_name,
    pc_name,
    transpose,
)
from fretexplorer.theory.scales import SCALE_DEFS, ScaleDef, ScaleType, degree_position, scale_def, scale_notes
from fretexplorer.theory.scales import _check_table as check_scales


class PitchClassTests(unittest.TestCase):
    def test_index_and_name_agree(self) -> None:
        for i, name in enumerate(PITCH_CLASS_NAMES_SHARP):
            self.assertEqual(index_of(name), i)
            self.assertEqual(pc_name(i), name)
        self.assertEqual(pc_name(12), "C")
        self.assertEqual(pc_name(-1), "B")

    def test_transpose_is_closed_for_any_interval(self) -> None:
        for name in PITCH_CLASS_NAMES_SHARP:
            for i in range(-40, 41):
                out = transpose(name, i)
                self.assertIn(out, PITCH_CLASS_NAMES_SHARP)
                self.assertEqual(out, transpose(name, i % 12))

    def test_negative_interval_wraps(self) -> None:
        self.assertEqual(transpose("C", -1), "B")
        self.assertEqual(transpose("A", -13), "G#")
        self.assertEqual(transpose("E", 25), "F")

    def test_flats_are_accepted_and_spelled_sharp(self) -> None:
        self.assertEqual(index_of("Bb"), 10)
        self.assertEqual(normalize_name("Db"), "C#")
        self.assertEqual(transpose("Eb", 0), "D#")

    def test_unknown_name_raises(self) -> None:
        with self.assertRaises(ValueError):
            index_of("H")

    def test_interval_between(self) -> None:
        self.assertEqual(interval_between("A", "B"), 2)
        self.assertEqual(interval_between("A", "G#"), 11)
        self.assertEqual(interval_between("C", "C"), 0)
        self.assertEqual(interval_between("B", "C"), 1)


class CatalogTests(unittest.TestCase):
    def test_chord_table_shape(self) -> None:
        self.assertEqual(len(list_chords()), 9)
        for chord in ChordType:
            ivs = chord_intervals(chord)
            self.assertEqual(ivs[0], 0)
            self.assertTrue(all(0 <= i <= 11 for i in ivs))
        self.assertEqual(set(CHORD_INTERVALS), set(ChordType))

    def test_scale_table_shape(self) -> None:
        self.assertEqual(len(list_scales()), 7)
        for scale in ScaleType:
            sd = scale_def(scale)
            self.assertEqual(len(sd.intervals), len(sd.modes))
            self.assertEqual(sd.intervals[0], 0)
            self.assertEqual(list(sd.intervals), sorted(set(sd.intervals)))
        self.assertEqual(set(SCALE_DEFS), set(ScaleType))

    def test_a_major_chord(self) -> None:
        self.assertEqual(chord_notes("A", ChordType.MAJOR), ["A", "C#", "E"])

    def test_c_minor_seven(self) -> None:
        self.assertEqual(set(chord_notes("C", ChordType.MINOR_7)), {"C", "D#", "G", "A#"})

    def test_a_major_scale(self) -> None:
        notes = scale_notes("A", ScaleType.MAJOR)
        self.assertEqual(notes, ["A", "B", "C#", "D", "E", "F#", "G#"])
        self.assertEqual(len(set(notes)), 7)

    def test_relative_modes_rotate(self) -> None:
        self.assertEqual(scale_def(ScaleType.NATURAL_MINOR).modes[2], "Ionian")
        self.assertEqual(scale_def(ScaleType.DORIAN).modes[-1], "Ionian")
        self.assertEqual(scale_def(ScaleType.MIXOLYDIAN).modes[1], "Aeolian")
        self.assertEqual(scale_def(ScaleType.PENTATONIC_MINOR).modes[1], "Major Pentatonic")

    def test_degree_position(self) -> None:
        self.assertEqual(degree_position("A", "B", ScaleType.MAJOR), 1)
        self.assertEqual(degree_position("A", "A", ScaleType.MAJOR), 0)
        self.assertIsNone(degree_position("A", "C", ScaleType.MAJOR))

    def test_parse_by_display_name_and_loose_spelling(self) -> None:
        self.assertIs(parse_chord_type("Major 7"), ChordType.MAJOR_7)
        self.assertIs(parse_chord_type("Major7"), ChordType.MAJOR_7)
        self.assertIs(parse_chord_type("dominant_7"), ChordType.DOMINANT_7)
        self.assertIs(parse_chord_type(ChordType.SUS2), ChordType.SUS2)
        self.assertIs(parse_scale_type("Major (Ionian)"), ScaleType.MAJOR)
        self.assertIs(parse_scale_type("aeolian"), ScaleType.NATURAL_MINOR)
        self.assertIs(parse_scale_type("Pentatonic Minor"), ScaleType.PENTATONIC_MINOR)

    def test_parse_none(self) -> None:
        self.assertIsNone(parse_chord_type("none"))
        self.assertIsNone(parse_chord_type(None))
        self.assertIsNone(parse_scale_type("None"))

    def test_unknown_names_raise_invalid_catalog_key(self) -> None:
        with self.assertRaises(InvalidCatalogKey):
            parse_chord_type("Major 13")
        with self.assertRaises(InvalidCatalogKey):
            parse_scale_type("Lydian Dominant")
        with self.assertRaises(KeyError):
            parse_scale_type(42)  # type: ignore[arg-type]

    def test_invalid_catalog_key_message(self) -> None:
        err = InvalidCatalogKey("chord", "Nope")
        self.assertEqual(str(err), "Unknown chord: 'Nope'")
        self.assertEqual(err.kind, "chord")

    def test_enum_values_are_the_display_names(self) -> None:
        self.assertEqual(ChordType.DOMINANT_7.value, "Dominant 7")
        self.assertEqual(ScaleType.MAJOR.value, "Major (Ionian)")
        self.assertFalse(hasattr(ChordType.MAJOR, "display_name"))
        self.assertFalse(hasattr(ScaleType.MAJOR, "display_name"))

    def test_chord_table_check_rejects_bad_rows(self) -> None:
        check_chords(CHORD_INTERVALS)
        with self.assertRaises(ValueError):
            check_chords({**CHORD_INTERVALS, ChordType.MAJOR: (4, 7)})
        with self.assertRaises(ValueError):
            check_chords({**CHORD_INTERVALS, ChordType.SUS4: (0, 5, 12)})
        with self.assertRaises(ValueError):
            check_chords({c: ivs for c, ivs in CHORD_INTERVALS.items() if c is not ChordType.SUS2})

    def test_scale_table_check_rejects_bad_rows(self) -> None:
        check_scales(SCALE_DEFS)
        blues_modes = SCALE_DEFS[ScaleType.BLUES].modes
        bad_rows = [
            ScaleDef((0, 3, 5, 6, 7), blues_modes),
            ScaleDef((1, 3, 5, 6, 7, 10), blues_modes),
            ScaleDef((0, 5, 3, 6, 7, 10), blues_modes),
            ScaleDef((0, 3, 5, 6, 7, 12), blues_modes),
        ]
        for row in bad_rows:
            with self.assertRaises(ValueError):
                check_scales({**SCALE_DEFS, ScaleType.BLUES: row})
        with self.assertRaises(ValueError):
            check_scales({s: sd for s, sd in SCALE_DEFS.items() if s is not ScaleType.DORIAN})


if __name__ == "__main__":
    unittest.main()
