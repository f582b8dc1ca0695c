"""
Projection export module.

Pure formatting of projection rows for download.
"""
from .csv_export import CSV_COLUMNS, projection_to_csv, write_projection_csv

__all__ = ["CSV_COLUMNS", "projection_to_csv", "write_projection_csv"]
