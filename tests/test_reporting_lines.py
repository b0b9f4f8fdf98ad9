"""Tests for the excessive reporting lines report."""

import pytest

from org_analytics.errors import InvalidThresholdError, NullTreeError
from org_analytics.hr.models import EmployeeRecord
from org_analytics.hr.org_structure import build_hierarchy
from org_analytics.hr.reporting_lines import find_excessive_reporting_lines


def _emp(employee_id, manager_id=None) -> EmployeeRecord:
    return EmployeeRecord(employee_id, f"First{employee_id}", f"Last{employee_id}", 1_000, manager_id)


def _chain(length: int):
    """CEO 0 with a single line of *length* employees below."""
    return build_hierarchy([_emp(0)] + [_emp(i, i - 1) for i in range(1, length + 1)])


class TestFindExcessiveReportingLines:
    def test_chain_root_a_b_c(self):
        root = _chain(3)
        result = find_excessive_reporting_lines(root, 2)
        assert {e.employee_id: n for e, n in result.items()} == {3: 1}

    def test_scenario_company(self, small_company):
        result = find_excessive_reporting_lines(build_hierarchy(small_company), 2)
        assert {e.employee_id: n for e, n in result.items()} == {5: 1}

    def test_default_threshold(self, small_company):
        assert find_excessive_reporting_lines(build_hierarchy(small_company)) == {}

    def test_excess_grows_with_depth(self):
        result = find_excessive_reporting_lines(_chain(7))
        assert {e.employee_id: n for e, n in result.items()} == {5: 1, 6: 2, 7: 3}

    def test_zero_threshold_reports_everyone_but_ceo(self, small_company):
        result = find_excessive_reporting_lines(build_hierarchy(small_company), 0)
        assert [e.employee_id for e in result] == [2, 4, 5, 3]
        assert result[small_company[3]] == 2

    def test_deep_chain(self):
        result = find_excessive_reporting_lines(_chain(3_000))
        assert len(result) == 2_996
        assert max(result.values()) == 2_996

    def test_lone_ceo(self):
        assert find_excessive_reporting_lines(build_hierarchy([_emp(1)]), 0) == {}


class TestInvalidInput:
    def test_null_tree(self):
        with pytest.raises(NullTreeError):
            find_excessive_reporting_lines(None)

    def test_null_threshold(self):
        with pytest.raises(InvalidThresholdError):
            find_excessive_reporting_lines(_chain(1), None)

    def test_negative_threshold(self):
        with pytest.raises(InvalidThresholdError):
            find_excessive_reporting_lines(_chain(1), -1)
