"""Ingest raw employee exports (CSV with id, firstName, lastName, salary, managerId)."""

import logging
from pathlib import Path

import pandas as pd

from org_analytics.errors import RecordParseError
from org_analytics.utils.io import FilePath, read_csv_with_fallback

logger = logging.getLogger(__name__)

# Export header (lower-cased) -> canonical column
HEADER_COLUMNS = {
    "id": "employee_id",
    "firstname": "first_name",
    "lastname": "last_name",
    "salary": "salary",
    "managerid": "manager_id",
}
POSITIONAL_COLUMNS = list(HEADER_COLUMNS.values())
MINIMUM_REQUIRED_VALUES = 4


def _map_header(columns: list[str]) -> dict[str, str]:
    """Map the file's own column names onto canonical ones, in any order."""
    by_lower = {str(col).strip().lower(): col for col in columns}
    for required in HEADER_COLUMNS:
        if required not in by_lower:
            raise RecordParseError(f"Required header not found on header file: {required}")
    return {by_lower[key]: canonical for key, canonical in HEADER_COLUMNS.items()}


def _check_row_lengths(df: pd.DataFrame, first_line: int) -> None:
    """Reject rows missing any of the four mandatory values."""
    present = df[POSITIONAL_COLUMNS[:MINIMUM_REQUIRED_VALUES]].notna().sum(axis=1)
    short = present[present < MINIMUM_REQUIRED_VALUES]
    if not short.empty:
        line = first_line + int(short.index[0])
        raise RecordParseError(
            f"Error on line number {line} -> Line has less elements than the required size "
            f"{MINIMUM_REQUIRED_VALUES}"
        )


def read_employee_csv(path: FilePath, has_header: bool = True) -> pd.DataFrame:
    """Read an employee export into a DataFrame with canonical column names.

    With ``has_header`` the header is matched case-insensitively, so
    ``ID,managerId,...`` in any order is accepted. Without it, columns are
    taken positionally and the manager id column may be omitted entirely.
    """
    path = Path(path)
    if has_header:
        raw = read_csv_with_fallback(path, skipinitialspace=True)
        if raw.empty and not len(raw.columns):
            raise RecordParseError(f"{path.name} has no header line")
        mapping = _map_header(raw.columns.tolist())
        df = raw[list(mapping)].rename(columns=mapping)
        first_line = 2
    else:
        df = read_csv_with_fallback(
            path,
            header=None,
            names=POSITIONAL_COLUMNS,
            skipinitialspace=True,
        )
        if df.empty:
            df = pd.DataFrame(columns=POSITIONAL_COLUMNS)
        first_line = 1

    _check_row_lengths(df, first_line)
    logger.info("Read %d employee row(s) from %s", len(df), path.name)
    return df
