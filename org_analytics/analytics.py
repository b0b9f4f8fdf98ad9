"""Run the hierarchy analytics end to end: load, build, report."""

import logging
from dataclasses import dataclass, field

from org_analytics.config import AnalyticsConfig
from org_analytics.errors import SourceError
from org_analytics.hr.compensation import PolicyViolations, find_salary_policy_violations
from org_analytics.hr.models import EmployeeRecord, TreeNode
from org_analytics.hr.org_structure import OrphanWarning, resolve_hierarchy
from org_analytics.hr.report import (
    orphan_table,
    print_excessive_reporting_lines,
    print_renderable,
    print_salary_violations,
)
from org_analytics.hr.reporting_lines import ExcessiveLines, find_excessive_reporting_lines
from org_analytics.hr.transform import load_employees
from org_analytics.utils.types import RunStatus, ValidationOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsResult:
    root: TreeNode
    salary_violations: PolicyViolations
    excessive_reporting_lines: ExcessiveLines
    orphans: list[OrphanWarning] = field(default_factory=list)


def _load(config: AnalyticsConfig) -> list[EmployeeRecord]:
    logger.info("Loading file: %s", config.source.path)
    try:
        return load_employees(config.source.path, config.source.has_header)
    except SourceError:
        logger.error("Could not load employees from %s", config.source.path)
        raise


def validate(config: AnalyticsConfig) -> ValidationOutcome:
    """Check that the configured source loads, without building anything."""
    try:
        records = _load(config)
        return {"status": RunStatus.OK, "rows_available": len(records)}
    except SourceError as exc:
        return {"status": RunStatus.ERROR, "message": str(exc)}


def run_analytics(config: AnalyticsConfig, print_reports: bool = True) -> AnalyticsResult:
    """Execute the full analytics run and print each report."""
    records = _load(config)
    logger.info("Employees loaded: %d", len(records))

    resolved = resolve_hierarchy(records)
    policy, lines = config.salary_policy, config.reporting_lines

    violations = find_salary_policy_violations(resolved.root, policy.min_percent, policy.max_percent)
    excessive = find_excessive_reporting_lines(resolved.root, lines.threshold)

    if print_reports:
        if resolved.orphans:
            print_renderable(orphan_table(resolved.orphans))
        print_salary_violations(violations, policy.min_percent, policy.max_percent)
        print_excessive_reporting_lines(excessive, lines.threshold)

    return AnalyticsResult(
        root=resolved.root,
        salary_violations=violations,
        excessive_reporting_lines=excessive,
        orphans=resolved.orphans,
    )
