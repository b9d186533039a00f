"""Output formatting modules."""

from .formatters import format_table, format_json
from .csv_export import export_to_csv

__all__ = [
    "format_table",
    "format_json",
    "export_to_csv",
]
