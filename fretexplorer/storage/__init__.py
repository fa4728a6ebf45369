from .schema import NOTES, CATEGORIES, DTYPES, CellRow
from .store import validate_rows, grid_to_frame, export_csv

__all__ = [
    "NOTES",
    "CATEGORIES",
    "DTYPES",
    "CellRow",
    "validate_rows",
    "grid_to_frame",
    "export_csv",
]
