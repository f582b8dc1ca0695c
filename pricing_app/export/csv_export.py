"""
CSV export of projection rows.

One row per period with the recurring fee, the implementation (one-time) fee
charged that period, whether the model minimum floored it, and the total.
"""

import csv
import io
from collections.abc import Sequence
from pathlib import Path
from typing import Union

import structlog

from ..errors import ExportError
from ..models.projection import ProjectionResult

logger = structlog.get_logger(__name__)

CSV_COLUMNS = (
    "Period",
    "Date",
    "Units",
    "Monthly Fee",
    "One-Time Fee",
    "Minimum Applied",
    "Total",
)


def _amount(value: float, decimal_places: int) -> str:
    return f"{value:.{decimal_places}f}"


def projection_to_csv(
    results: Sequence[ProjectionResult],
    delimiter: str = ",",
    include_header: bool = True,
    decimal_places: int = 2
) -> str:
    """
    Format projection rows as CSV text.

    Periods are numbered from 1 for display.

    Args:
        results: Projection rows
        delimiter: Field delimiter
        include_header: Include the column header row
        decimal_places: Digits after the decimal point for amounts

    Returns:
        CSV text with ``\\r\\n`` line endings
    """
    buffer = io.StringIO()
    try:
        writer = csv.writer(buffer, delimiter=delimiter)
    except TypeError as e:
        raise ExportError(f"Invalid CSV delimiter {delimiter!r}: {e}", export_format="csv") from e

    if include_header:
        writer.writerow(CSV_COLUMNS)

    for result in results:
        writer.writerow((
            result.period + 1,
            result.date.isoformat(),
            result.units,
            _amount(result.monthly_fee, decimal_places),
            _amount(result.one_time_fee, decimal_places),
            "Yes" if result.minimum_applied else "No",
            _amount(result.total_fee, decimal_places),
        ))

    return buffer.getvalue()


def write_projection_csv(
    results: Sequence[ProjectionResult],
    path: Union[str, Path],
    **options
) -> Path:
    """Write projection rows to a CSV file and return its path."""
    target = Path(path)
    content = projection_to_csv(results, **options)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", newline="", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ExportError(f"Failed to write projection CSV to {target}: {e}",
                          export_format="csv", context={"path": str(target)}) from e

    logger.info("Projection exported", path=str(target), rows=len(results))
    return target
