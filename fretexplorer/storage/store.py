from __future__ import annotations

"""Tabular export of a generated fretboard using pandas.

Unit of data: one row per (string × fret) cell. Only derived grid data is
written; the selection that produced it is never stored.
"""

from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from ..app.selection import Toggles
from ..fretboard.classify import display_category
from ..fretboard.generator import FretboardGrid
from .schema import DTYPES, CellRow


def _empty_df() -> pd.DataFrame:
    return pd.DataFrame({k: pd.Series(dtype=v) for k, v in DTYPES.items()})


def validate_rows(rows: Iterable[Any]) -> pd.DataFrame:
    """Validate row mappings/CellRows and return a DataFrame with proper dtypes.

    - Enforces string/fret ranges, note names and degree consistency via Pydantic.
    - Returns a pandas DataFrame with categorical and nullable dtypes.
    """
    models = [r if isinstance(r, CellRow) else CellRow.model_validate(r) for r in rows]
    if not models:
        return _empty_df()
    df = pd.DataFrame([m.model_dump() for m in models])
    for col, dt in DTYPES.items():
        df[col] = df[col].astype(dt)
    return df[list(DTYPES.keys())]


def grid_to_frame(grid: FretboardGrid, toggles: Toggles | None = None) -> pd.DataFrame:
    """Flatten a fretboard grid into a typed DataFrame, string-major order."""
    toggles = toggles or Toggles()
    rows = []
    for row in grid:
        for cell in row:
            data = asdict(cell)
            data["category"] = display_category(cell, toggles).value
            rows.append(data)
    return validate_rows(rows)


def export_csv(df: pd.DataFrame, path: Path) -> Path:
    """Write the frame as CSV, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
