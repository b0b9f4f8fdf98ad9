"""Tests for running reports on one shared tree from several threads."""

import io
from concurrent.futures import ThreadPoolExecutor

from rich.console import Console

from org_analytics.hr import report
from org_analytics.hr.compensation import find_salary_policy_violations
from org_analytics.hr.models import EmployeeRecord, TreeNode
from org_analytics.hr.org_structure import build_hierarchy
from org_analytics.hr.reporting_lines import find_excessive_reporting_lines


def _emp(employee_id, manager_id=None, salary=50_000) -> EmployeeRecord:
    return EmployeeRecord(employee_id, f"First{employee_id}", f"Last{employee_id}", salary, manager_id)


def _wide_company() -> TreeNode:
    """CEO 0 over 20 managers, each with a chain of 6 reports below."""
    records = [_emp(0, None, 1_000_000)]
    for m in range(1, 21):
        records.append(_emp(m, 0, 40_000 + m * 1_000))
        previous = m
        for level in range(1, 7):
            employee_id = m * 100 + level
            records.append(_emp(employee_id, previous, 30_000 + level * 500))
            previous = employee_id
    return build_hierarchy(records)


def _relations(root: TreeNode) -> set[tuple[int, int]]:
    return {
        (node.employee.employee_id, child.employee.employee_id)
        for node in root.iter_preorder()
        for child in node.children
    }


class TestSharedTree:
    def test_reports_agree_across_threads(self):
        root = _wide_company()
        relations_before = _relations(root)
        expected_violations = find_salary_policy_violations(root)
        expected_excessive = find_excessive_reporting_lines(root, 3)

        with ThreadPoolExecutor(max_workers=8) as pool:
            violations = [pool.submit(find_salary_policy_violations, root) for _ in range(16)]
            excessive = [pool.submit(find_excessive_reporting_lines, root, 3) for _ in range(16)]

            assert all(f.result() == expected_violations for f in violations)
            assert all(f.result() == expected_excessive for f in excessive)

        assert expected_violations
        assert expected_excessive
        assert _relations(root) == relations_before
        assert root.size() == 1 + 20 * 7

    def test_result_order_is_stable_across_threads(self):
        root = _wide_company()
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: list(find_excessive_reporting_lines(root, 2)), range(8)))
        assert all(r == results[0] for r in results)


class TestConcurrentPrinting:
    def test_tables_are_not_interleaved(self, monkeypatch):
        buffer = io.StringIO()
        monkeypatch.setattr(report, "console", Console(file=buffer, width=120, force_terminal=False))

        root = _wide_company()
        violations = find_salary_policy_violations(root)
        excessive = find_excessive_reporting_lines(root, 3)

        jobs = []
        for threshold in range(8):
            jobs.append(lambda: report.print_salary_violations(violations, 20, 50))
            jobs.append(lambda t=threshold: report.print_excessive_reporting_lines(excessive, t))

        with ThreadPoolExecutor(max_workers=8) as pool:
            for future in [pool.submit(job) for job in jobs]:
                future.result()

        output = buffer.getvalue()
        salary_text = report.render_to_text(report.salary_violation_table(violations, 20, 50))
        pieces = [salary_text] * 8 + [
            report.render_to_text(report.excessive_lines_table(excessive, t)) for t in range(8)
        ]

        assert output.count(salary_text) == 8
        for piece in pieces[8:]:
            assert piece in output
        assert len(output) == sum(len(p) for p in pieces)
