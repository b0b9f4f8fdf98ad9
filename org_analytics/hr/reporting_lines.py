"""Reporting line depth checks."""

import logging

from org_analytics.errors import InvalidThresholdError, NullTreeError
from org_analytics.hr.models import EmployeeRecord, TreeNode

logger = logging.getLogger(__name__)

DEFAULT_REPORTING_LINES_THRESHOLD = 4

type ExcessiveLines = dict[EmployeeRecord, int]


def find_excessive_reporting_lines(
    root: TreeNode | None,
    threshold: int | None = DEFAULT_REPORTING_LINES_THRESHOLD,
) -> ExcessiveLines:
    """Map employees with more than *threshold* managers above them to the excess.

    The CEO sits at depth 0, so an employee at depth ``d`` has ``d`` managers
    between them and the CEO, counting the CEO.
    """
    if threshold is None:
        raise InvalidThresholdError("Reporting lines threshold must not be None")
    if threshold < 0:
        raise InvalidThresholdError(f"Reporting lines threshold must not be negative, got {threshold}")
    if root is None:
        raise NullTreeError()

    excessive: ExcessiveLines = {}
    for node, depth in root.iter_with_depth():
        if depth > threshold:
            excessive[node.employee] = depth - threshold

    logger.info("Reporting lines above %d: %d employee(s)", threshold, len(excessive))
    return excessive
