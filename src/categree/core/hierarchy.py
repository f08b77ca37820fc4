"""
Hierarchy indexing and traversal utilities.

Centralized functions for flat category list operations:
- Parent index building
- Pre-order tree sequencing
- Orphan detection and reconciliation
- Cycle detection
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, TypeVar

from categree.core.errors import CyclicStructure, InvalidArgument
from categree.core.models import CategoryNode

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CategoryNode)


@dataclass
class CycleInfo:
    """Pure data structure for cycle detection results."""

    cycle_members: Set[int] = field(default_factory=set)
    cycle_paths: List[List[int]] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Parent Index
# -----------------------------------------------------------------------------


def build_parent_index(records: Optional[Iterable[T]]) -> Dict[int, List[T]]:
    """Build parent_id -> [children] mapping.

    Children keep the order in which they appear in the input.

    Args:
        records: Flat sequence of category nodes

    Returns:
        Dict mapping each parent id to its direct children

    Raises:
        InvalidArgument: If records is None or two records share an id
    """
    if records is None:
        raise InvalidArgument("records must not be None")

    index: Dict[int, List[T]] = {}
    seen: Set[int] = set()

    for record in records:
        if record.id in seen:
            raise InvalidArgument(f"Duplicate category id {record.id}")
        seen.add(record.id)
        index.setdefault(record.parent_id, []).append(record)

    logger.debug("Indexed %d categories under %d parents", len(seen), len(index))
    return index


# -----------------------------------------------------------------------------
# Traversal
# -----------------------------------------------------------------------------


def sequence_tree(index: Dict[int, List[T]], root_parent_id: int = 0) -> List[T]:
    """Pre-order walk of the parent index starting below root_parent_id.

    Each child is emitted and its whole subtree follows before the next
    sibling. Siblings keep the index order.

    Args:
        index: Mapping built by build_parent_index()
        root_parent_id: Parent id whose children start the walk

    Returns:
        List of reachable records in pre-order

    Raises:
        CyclicStructure: If a record would be emitted twice
    """
    result: List[T] = []
    visited: Set[int] = set()
    # (parent_id, position of the next child to emit)
    stack: List[Tuple[int, int]] = [(root_parent_id, 0)]

    while stack:
        parent_id, position = stack[-1]
        children = index.get(parent_id, ())
        if position >= len(children):
            stack.pop()
            continue

        stack[-1] = (parent_id, position + 1)
        node = children[position]
        if node.id in visited:
            chain = [pid for pid, _ in stack]
            logger.debug("Cycle detected at category %d", node.id)
            raise CyclicStructure(node.id, chain)

        visited.add(node.id)
        result.append(node)
        stack.append((node.id, 0))

    return result


def append_orphans(
    records: Sequence[T],
    result: List[T],
    ignore_orphans: bool = False,
) -> List[T]:
    """Append records missing from result, in original input order.

    Args:
        records: The complete input sequence
        result: Output of sequence_tree(); extended in place
        ignore_orphans: Drop unvisited records instead of appending them

    Returns:
        The result list
    """
    if ignore_orphans or len(result) == len(records):
        return result

    emitted = {node.id for node in result}
    orphans = [record for record in records if record.id not in emitted]
    logger.debug("Appending %d orphaned categories", len(orphans))
    result.extend(orphans)
    return result


def sort_for_tree(
    records: Optional[Iterable[T]],
    root_parent_id: int = 0,
    ignore_orphans: bool = False,
) -> List[T]:
    """Sort categories for tree representation.

    Example:
        (id, parent_id) = (1, 0), (2, 1), (3, 1), (4, 2), (5, 99)
        sorts to ids [1, 2, 4, 3, 5]; with ignore_orphans the
        result is [1, 2, 4, 3].

    Args:
        records: Flat sequence of category nodes
        root_parent_id: Parent id whose children form the top level
        ignore_orphans: Drop categories whose parent is not in records

    Returns:
        Records in pre-order, optionally followed by orphans

    Raises:
        InvalidArgument: If records is None or contains duplicate ids
        CyclicStructure: If the walk would revisit a category
    """
    if records is None:
        raise InvalidArgument("records must not be None")

    records = list(records)
    if not records:
        return []

    index = build_parent_index(records)
    result = sequence_tree(index, root_parent_id)
    return append_orphans(records, result, ignore_orphans)


# -----------------------------------------------------------------------------
# Utilities
# -----------------------------------------------------------------------------


def find_orphans(records: Optional[Iterable[T]], root_parent_id: int = 0) -> List[T]:
    """Find categories not reachable from root_parent_id.

    These are the records sort_for_tree() appends after the tree.

    Args:
        records: Flat sequence of category nodes
        root_parent_id: Parent id whose children form the top level

    Returns:
        Unreachable records in input order

    Raises:
        InvalidArgument: If records is None or contains duplicate ids
        CyclicStructure: If the walk from root_parent_id revisits a category
    """
    if records is None:
        raise InvalidArgument("records must not be None")

    records = list(records)
    reachable = sequence_tree(build_parent_index(records), root_parent_id)
    reached = {node.id for node in reachable}
    return [record for record in records if record.id not in reached]


def detect_cycles(records: Iterable[CategoryNode]) -> CycleInfo:
    """Detect parent chains that loop back on themselves. PURE - no mutation.

    A cycle not containing root_parent_id is unreachable from it, so
    sort_for_tree() treats its members as orphans. A cycle that does contain
    root_parent_id is walked into, and sort_for_tree() and find_orphans()
    raise CyclicStructure. This reports cycles regardless of the root.

    Args:
        records: Flat sequence of category nodes

    Returns:
        CycleInfo with cycle_members and cycle_paths
    """
    by_id = {record.id: record for record in records}
    done: Set[int] = set()
    info = CycleInfo()

    for start in by_id:
        path: List[int] = []
        on_path: Dict[int, int] = {}
        current = start

        while current in by_id and current not in done:
            if current in on_path:
                cycle = path[on_path[current]:]
                info.cycle_members.update(cycle)
                info.cycle_paths.append(cycle + [current])
                break
            on_path[current] = len(path)
            path.append(current)
            current = by_id[current].parent_id

        done.update(path)

    return info
