"""Salary policy checks — managers against the average pay of their direct reports."""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from fractions import Fraction

from org_analytics.errors import InvalidBoundsError, NullTreeError
from org_analytics.hr.models import EmployeeRecord, TreeNode

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_PERCENTAGE = 20
DEFAULT_MAXIMUM_PERCENTAGE = 50

_CENTS = Decimal("0.01")

type PolicyViolations = dict[EmployeeRecord, "SalaryViolation"]


class ViolationKind(StrEnum):
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class SalaryBounds:
    average: Fraction
    lower: Fraction
    upper: Fraction


@dataclass(frozen=True)
class SalaryViolation:
    kind: ViolationKind
    amount: Decimal
    average: Decimal
    lower_bound: Decimal
    upper_bound: Decimal

    def describe(self) -> str:
        match self.kind:
            case ViolationKind.BELOW_MINIMUM:
                return f"Salary is {self.amount:.2f} lesser than the minimum salary allowed"
            case ViolationKind.ABOVE_MAXIMUM:
                return f"Salary is {self.amount:.2f} higher than the maximum salary allowed"


def _to_money(value: Fraction) -> Decimal:
    return (Decimal(value.numerator) / Decimal(value.denominator)).quantize(_CENTS, ROUND_HALF_UP)


def _check_percentages(minimum_percentage: int | None, maximum_percentage: int | None) -> None:
    if minimum_percentage is None:
        raise InvalidBoundsError("Minimum percentage must not be None")
    if maximum_percentage is None:
        raise InvalidBoundsError("Maximum percentage must not be None")
    if minimum_percentage > maximum_percentage:
        raise InvalidBoundsError(
            f"Minimum percentage {minimum_percentage} is greater than maximum percentage {maximum_percentage}"
        )


def salary_bounds(
    subordinate_salaries: list,
    minimum_percentage: int = DEFAULT_MINIMUM_PERCENTAGE,
    maximum_percentage: int = DEFAULT_MAXIMUM_PERCENTAGE,
) -> SalaryBounds:
    """Allowed salary range for a manager of the given direct reports."""
    average = sum(Fraction(s) for s in subordinate_salaries) / len(subordinate_salaries)
    return SalaryBounds(
        average=average,
        lower=average * (1 + Fraction(minimum_percentage) / 100),
        upper=average * (1 + Fraction(maximum_percentage) / 100),
    )


def evaluate_manager(node: TreeNode, minimum_percentage: int, maximum_percentage: int) -> SalaryViolation | None:
    """Check one manager node; leaves and compliant managers give ``None``."""
    if node.is_leaf:
        return None

    bounds = salary_bounds(
        [child.employee.salary for child in node.children],
        minimum_percentage,
        maximum_percentage,
    )
    salary = Fraction(node.employee.salary)

    if salary < bounds.lower:
        kind, amount = ViolationKind.BELOW_MINIMUM, bounds.lower - salary
    elif salary > bounds.upper:
        kind, amount = ViolationKind.ABOVE_MAXIMUM, salary - bounds.upper
    else:
        return None

    return SalaryViolation(
        kind=kind,
        amount=_to_money(amount),
        average=_to_money(bounds.average),
        lower_bound=_to_money(bounds.lower),
        upper_bound=_to_money(bounds.upper),
    )


def find_salary_policy_violations(
    root: TreeNode | None,
    minimum_percentage: int | None = DEFAULT_MINIMUM_PERCENTAGE,
    maximum_percentage: int | None = DEFAULT_MAXIMUM_PERCENTAGE,
) -> PolicyViolations:
    """Map every manager paid outside the allowed band to their violation.

    A manager should earn at least ``minimum_percentage`` and at most
    ``maximum_percentage`` more than the average salary of their direct
    subordinates. Bounds are inclusive.
    """
    _check_percentages(minimum_percentage, maximum_percentage)
    if root is None:
        raise NullTreeError()

    violations: PolicyViolations = {}
    for node in root.iter_preorder():
        violation = evaluate_manager(node, minimum_percentage, maximum_percentage)
        if violation is not None:
            violations[node.employee] = violation

    logger.info(
        "Salary policy (%d%%-%d%%): %d manager(s) in violation",
        minimum_percentage, maximum_percentage, len(violations),
    )
    return violations
