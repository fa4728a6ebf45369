from __future__ import annotations

"""Schema constants and Pydantic models for the tabular fretboard view."""

from typing import Literal, Optional

from pandas.api.types import CategoricalDtype
from pydantic import BaseModel, Field, field_validator, model_validator

from ..fretboard.classify import DisplayCategory
from ..fretboard.tuning import MAX_FRETS, STRING_COUNT
from ..theory.note_utils import PITCH_CLASS_NAMES_SHARP

# --- Constants ---

NOTES = list(PITCH_CLASS_NAMES_SHARP)
CATEGORIES = [c.value for c in DisplayCategory]


def _cat_dtype(categories: list[str]) -> CategoricalDtype:
    return CategoricalDtype(categories=categories, ordered=False)


DTYPES = {
    "string": "UInt8",
    "fret": "UInt8",
    "note": _cat_dtype(NOTES),
    "is_root": "boolean",
    "is_chord_tone": "boolean",
    "is_scale_tone": "boolean",
    "scale_degree": "UInt8",
    "mode": "string",
    "category": _cat_dtype(CATEGORIES),
}


# --- Pydantic models ---

class CellRow(BaseModel):
    string: int = Field(ge=0, lt=STRING_COUNT)
    fret: int = Field(ge=0, le=MAX_FRETS)
    note: Literal[tuple(NOTES)]  # type: ignore[valid-type]
    is_root: bool = False
    is_chord_tone: bool = False
    is_scale_tone: bool = False
    scale_degree: Optional[int] = Field(default=None, ge=1, le=12)
    mode: Optional[str] = None
    category: Literal[tuple(CATEGORIES)] = DisplayCategory.HIDDEN.value  # type: ignore[valid-type]

    @field_validator("category", mode="before")
    @classmethod
    def _category_value(cls, v):
        if isinstance(v, DisplayCategory):
            return v.value
        return v

    @model_validator(mode="after")
    def _degree_only_for_scale_tones(self) -> "CellRow":
        if self.is_scale_tone and self.scale_degree is None:
            raise ValueError("scale tones need a scale_degree")
        if not self.is_scale_tone and (self.scale_degree is not None or self.mode):
            raise ValueError("scale_degree/mode only apply to scale tones")
        return self
