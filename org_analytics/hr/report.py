"""Render hierarchy report results as rich tables."""

import threading

from rich.console import Console, RenderableType
from rich.table import Table

from org_analytics.hr.compensation import PolicyViolations
from org_analytics.hr.org_structure import OrphanWarning
from org_analytics.hr.reporting_lines import ExcessiveLines

console = Console()

# Reports may be produced from several threads; keep their tables contiguous
_print_lock = threading.Lock()


def salary_violation_table(
    violations: PolicyViolations,
    minimum_percentage: int,
    maximum_percentage: int,
) -> Table:
    table = Table(
        title="Employees with salary policy violation",
        caption=(
            f"Allowed: {minimum_percentage}% to {maximum_percentage}% above subordinates' average"
            f" | Violations: {len(violations)}"
        ),
    )
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("First name")
    table.add_column("Last name")
    table.add_column("Salary", justify="right")
    table.add_column("Violation")

    for employee, violation in violations.items():
        table.add_row(
            str(employee.employee_id),
            employee.first_name,
            employee.last_name,
            str(employee.salary),
            violation.describe(),
        )
    return table


def excessive_lines_table(excessive: ExcessiveLines, threshold: int) -> Table:
    table = Table(
        title=f"Employees with reporting line higher than {threshold}",
        caption=f"Employees with excessive reporting lines: {len(excessive)}",
    )
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("First name")
    table.add_column("Last name")
    table.add_column("Excessive reporting lines", justify="right")

    for employee, excess in excessive.items():
        table.add_row(str(employee.employee_id), employee.first_name, employee.last_name, str(excess))
    return table


def orphan_table(orphans: list[OrphanWarning]) -> Table:
    table = Table(title="Employees left out of the hierarchy")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Manager ID", justify="right")
    table.add_column("Reason", style="yellow")
    for orphan in orphans:
        table.add_row(str(orphan.employee.employee_id), str(orphan.employee.manager_id), str(orphan.reason))
    return table


def render_to_text(renderable: RenderableType, width: int = 120) -> str:
    """Capture a renderable as plain text."""
    buf = Console(file=None, force_terminal=False, width=width)
    with buf.capture() as capture:
        buf.print(renderable)
    return capture.get()


def print_renderable(renderable: RenderableType) -> None:
    with _print_lock:
        console.print(renderable)


def print_salary_violations(violations: PolicyViolations, minimum_percentage: int, maximum_percentage: int) -> None:
    print_renderable(salary_violation_table(violations, minimum_percentage, maximum_percentage))


def print_excessive_reporting_lines(excessive: ExcessiveLines, threshold: int) -> None:
    print_renderable(excessive_lines_table(excessive, threshold))
