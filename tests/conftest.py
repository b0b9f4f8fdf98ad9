"""
Pytest configuration and fixtures for org analytics tests.
"""

from pathlib import Path

import pytest

from org_analytics.hr.models import EmployeeRecord


@pytest.fixture
def small_company() -> list[EmployeeRecord]:
    """CEO 1 with reports 2 and 3; 4 reports to 2 and 5 to 4."""
    return [
        EmployeeRecord(1, "First1", "Last1", 60_000, None),
        EmployeeRecord(2, "First2", "Last2", 45_000, 1),
        EmployeeRecord(3, "First3", "Last3", 47_000, 1),
        EmployeeRecord(4, "First4", "Last4", 50_000, 2),
        EmployeeRecord(5, "First5", "Last5", 34_000, 4),
    ]


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "SampleData.csv"
    path.write_text(
        "Id,firstName,lastName,salary,managerId\n"
        "123,Joe,Doe,60000,\n"
        "124,Martin,Chekov,45000,123\n"
        "125,Bob,Ronstad,47000,123\n"
        "300,Alice,Hasacat,50000,124\n"
        "305,Brett,Hardleaf,34000,300\n"
    )
    return path
