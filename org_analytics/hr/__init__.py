"""HR / org hierarchy analytics.

Builds the reporting tree from employee records and checks it for managers
paid outside the salary policy and for employees with too long a reporting
line.
"""

from org_analytics.hr.models import EmployeeRecord, TreeNode
from org_analytics.hr.org_structure import (
    OrphanReason,
    OrphanWarning,
    ResolvedHierarchy,
    build_hierarchy,
    hierarchy_stats,
    resolve_hierarchy,
    summarize_hierarchy,
)
from org_analytics.hr.compensation import SalaryViolation, ViolationKind, find_salary_policy_violations
from org_analytics.hr.reporting_lines import find_excessive_reporting_lines
from org_analytics.hr.transform import load_employees
