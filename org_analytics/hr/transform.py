"""Normalize raw employee rows and turn them into validated records."""

import logging

import pandas as pd

from org_analytics.errors import RecordParseError
from org_analytics.hr.ingest import read_employee_csv
from org_analytics.hr.models import EmployeeRecord, employee_schema
from org_analytics.utils.io import FilePath
from org_analytics.utils.validators import validate_dataframe

logger = logging.getLogger(__name__)

INTEGER_COLUMNS = ("employee_id", "salary", "manager_id")


def _normalize_name(name: str) -> str:
    """Strip whitespace from names, keeping missing values missing."""
    return name.strip() if isinstance(name, str) else name


def _parse_manager_id(value):
    """Blank or missing -> NA, digit strings -> int; anything else is left for the schema to reject."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return pd.NA
        return int(value) if value.isdigit() else value
    return pd.NA if pd.isna(value) else value


def normalize_employee_rows(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Clean raw string columns before schema validation."""
    df = raw_df.copy()
    for col in ("first_name", "last_name"):
        df[col] = df[col].apply(_normalize_name)

    # Blank manager ids mean "no manager"
    if df["manager_id"].dtype == object:
        df["manager_id"] = df["manager_id"].map(_parse_manager_id)

    # Salaries sometimes arrive with currency symbols or thousands separators
    if df["salary"].dtype == object:
        df["salary"] = df["salary"].str.replace(r"[^\d.\-]", "", regex=True)
    return df


def _fractional_values(df: pd.DataFrame) -> list[str]:
    """Integer columns read as floats would otherwise be truncated by coercion."""
    errors = []
    for col in INTEGER_COLUMNS:
        values = df[col]
        if not pd.api.types.is_float_dtype(values):
            continue
        fractional = values[values.notna() & (values != values.round())]
        for idx, val in fractional.items():
            errors.append(f"Column '{col}' must be a whole number at row {idx}: {val}")
    return errors


def to_employee_records(df: pd.DataFrame) -> list[EmployeeRecord]:
    """Validate normalized rows and convert them into ``EmployeeRecord``s."""
    errors = _fractional_values(df)
    if errors:
        raise RecordParseError(f"Employee data has {len(errors)} non-integer value(s)", errors=errors)

    validated, outcome = validate_dataframe(df, employee_schema)
    if validated is None:
        raise RecordParseError(
            f"Employee data failed validation with {len(outcome['errors'])} error(s)",
            errors=outcome["errors"],
        )

    records = []
    for row in validated.itertuples(index=False):
        records.append(EmployeeRecord(
            employee_id=int(row.employee_id),
            first_name=row.first_name,
            last_name=row.last_name,
            salary=int(row.salary),
            manager_id=None if pd.isna(row.manager_id) else int(row.manager_id),
        ))
    return records


def load_employees(path: FilePath, has_header: bool = True) -> list[EmployeeRecord]:
    """Read, normalize and validate an employee export."""
    records = to_employee_records(normalize_employee_rows(read_employee_csv(path, has_header)))
    logger.info("Loaded %d employee record(s)", len(records))
    return records
