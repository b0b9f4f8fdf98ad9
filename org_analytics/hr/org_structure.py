"""Org hierarchy resolution — build the reporting tree and span-of-control metrics."""

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

import numpy as np
import pandas as pd

from org_analytics.errors import MultipleRootsFound, NoRootFound, NullTreeError
from org_analytics.hr.models import EmployeeID, EmployeeRecord, TreeNode

logger = logging.getLogger(__name__)

type ChildIndex = dict[EmployeeID, list[EmployeeRecord]]


class OrphanReason(StrEnum):
    UNKNOWN_MANAGER = "unknown_manager"
    UNREACHABLE = "unreachable"
    CYCLE = "cycle"


@dataclass(frozen=True)
class OrphanWarning:
    employee: EmployeeRecord
    reason: OrphanReason

    def describe(self) -> str:
        emp, mgr = self.employee.employee_id, self.employee.manager_id
        match self.reason:
            case OrphanReason.UNKNOWN_MANAGER:
                return f"Removing employee with id {emp}: no manager id {mgr} was found on the list"
            case OrphanReason.CYCLE:
                return f"Removing employee with id {emp}: manager chain through {mgr} is circular"
            case _:
                return f"Removing employee with id {emp}: manager {mgr} is not connected to the CEO"


@dataclass(frozen=True)
class ResolvedHierarchy:
    root: TreeNode
    orphans: list[OrphanWarning] = field(default_factory=list)


def find_ceo(records: Sequence[EmployeeRecord]) -> EmployeeRecord:
    """Return the single record without a manager."""
    candidates = [r for r in records if not r.has_manager]
    match candidates:
        case []:
            raise NoRootFound()
        case [ceo]:
            return ceo
        case _:
            raise MultipleRootsFound([c.employee_id for c in candidates])


def _drop_unknown_managers(
    records: Sequence[EmployeeRecord],
) -> tuple[list[EmployeeRecord], list[OrphanWarning]]:
    known_ids = {r.employee_id for r in records}
    kept, orphans = [], []
    for record in records:
        if not record.has_manager:
            continue
        if record.manager_id in known_ids:
            kept.append(record)
        else:
            orphans.append(OrphanWarning(record, OrphanReason.UNKNOWN_MANAGER))
    return kept, orphans


def _attach_until_fixpoint(
    ceo: EmployeeRecord,
    candidates: Iterable[EmployeeRecord],
) -> tuple[ChildIndex, deque[EmployeeRecord]]:
    """Attach candidates to managers already in the tree, pass after pass.

    Each pass walks the queue once; a candidate whose manager is not placed
    yet goes to the back. The loop stops once a whole pass attaches nobody.
    """
    placed: ChildIndex = {ceo.employee_id: []}
    queue = deque(candidates)

    while queue:
        attached = False
        for _ in range(len(queue)):
            record = queue.popleft()
            siblings = placed.get(record.manager_id)
            if siblings is None:
                queue.append(record)
                continue
            siblings.append(record)
            placed[record.employee_id] = []
            attached = True
        if not attached:
            break

    return placed, queue


def _freeze(ceo: EmployeeRecord, placed: ChildIndex) -> TreeNode:
    """Turn the child index into immutable nodes, leaves first."""
    order = [ceo]
    for record in order:
        order.extend(placed[record.employee_id])

    nodes: dict[EmployeeID, TreeNode] = {}
    for record in reversed(order):
        children = tuple(nodes.pop(c.employee_id) for c in placed[record.employee_id])
        nodes[record.employee_id] = TreeNode(record, children)
    return nodes[ceo.employee_id]


def _classify_leftovers(leftovers: Iterable[EmployeeRecord]) -> list[OrphanWarning]:
    by_id = {r.employee_id: r for r in leftovers}
    warnings = []
    for record in by_id.values():
        seen = set()
        current = record
        reason = OrphanReason.UNREACHABLE
        while current is not None:
            if current.employee_id in seen:
                reason = OrphanReason.CYCLE
                break
            seen.add(current.employee_id)
            current = by_id.get(current.manager_id)
        warnings.append(OrphanWarning(record, reason))
    return warnings


def resolve_hierarchy(records: Sequence[EmployeeRecord]) -> ResolvedHierarchy:
    """Build the reporting tree and report every employee left out of it."""
    ceo = find_ceo(records)
    candidates, orphans = _drop_unknown_managers(records)
    placed, leftovers = _attach_until_fixpoint(ceo, candidates)
    orphans.extend(_classify_leftovers(leftovers))

    for orphan in orphans:
        logger.warning(orphan.describe())

    root = _freeze(ceo, placed)
    logger.info(
        "Resolved org hierarchy: %d of %d employees placed, %d orphan(s)",
        len(placed), len(records), len(orphans),
    )
    return ResolvedHierarchy(root=root, orphans=orphans)


def build_hierarchy(records: Sequence[EmployeeRecord]) -> TreeNode:
    return resolve_hierarchy(records).root


def summarize_hierarchy(root: TreeNode | None) -> pd.DataFrame:
    """Flatten the tree into one pre-order row per employee with span-of-control metrics."""
    if root is None:
        raise NullTreeError()

    rows = []
    positions: dict[EmployeeID, int] = {}
    for node, depth in root.iter_with_depth():
        positions[node.employee.employee_id] = len(rows)
        rows.append({
            "employee_id": node.employee.employee_id,
            "manager_id": node.employee.manager_id,
            "depth": depth,
            "direct_reports": len(node.children),
            "total_reports": 0,
        })

    # Walking pre-order rows backwards visits every subtree before its parent
    for row in reversed(rows):
        mgr = row["manager_id"]
        if mgr is not None and mgr in positions:
            rows[positions[mgr]]["total_reports"] += row["total_reports"] + 1

    return pd.DataFrame(
        rows,
        columns=["employee_id", "manager_id", "depth", "direct_reports", "total_reports"],
    ).astype({"manager_id": "Int64"})


def hierarchy_stats(root: TreeNode | None) -> dict[str, int | float]:
    """Headcount, depth and span-of-control figures for the whole tree."""
    flat = summarize_hierarchy(root)
    spans = flat.loc[flat["direct_reports"] > 0, "direct_reports"].to_numpy()
    return {
        "headcount": len(flat),
        "max_depth": int(flat["depth"].max()),
        "managers": int(spans.size),
        "mean_span_of_control": round(float(np.mean(spans)), 2) if spans.size else 0.0,
    }
