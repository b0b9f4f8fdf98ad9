"""Employee record and hierarchy node types, plus the pandera schema for raw rows."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

import pandera as pa
from pandera import Column, Check

type EmployeeID = int
type SalaryAmount = int | float | Decimal


employee_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(int, Check.greater_than_or_equal_to(0), unique=True),
        "first_name": Column(str, Check.str_length(min_value=1, max_value=100)),
        "last_name": Column(str, Check.str_length(min_value=1, max_value=100)),
        "salary": Column(int, Check.greater_than_or_equal_to(0)),
        "manager_id": Column("Int64", nullable=True),
    },
    strict=False,
    coerce=True,
)


@dataclass(frozen=True)
class EmployeeRecord:
    employee_id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: EmployeeID | None = None

    def __post_init__(self) -> None:
        for name in ("employee_id", "first_name", "last_name", "salary"):
            if getattr(self, name) is None:
                raise ValueError(f"Employee {name} is missing")
        if self.salary < 0:
            raise ValueError(f"Employee {self.employee_id} has a negative salary")

    @property
    def has_manager(self) -> bool:
        return self.manager_id is not None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, eq=False)
class TreeNode:
    """One employee and the direct reports beneath them.

    Nodes compare by identity: two nodes holding equal records are still
    distinct positions in a tree. Children keep the order in which they were
    attached.
    """

    employee: EmployeeRecord
    children: tuple["TreeNode", ...] = field(default=())

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_with_depth(self, depth: int = 0) -> Iterator[tuple["TreeNode", int]]:
        """Yield ``(node, depth)`` pairs in pre-order, starting at *depth*."""
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            yield node, level
            stack.extend((child, level + 1) for child in reversed(node.children))

    def iter_preorder(self) -> Iterator["TreeNode"]:
        for node, _ in self.iter_with_depth():
            yield node

    def size(self) -> int:
        return sum(1 for _ in self.iter_preorder())
