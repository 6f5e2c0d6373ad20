"""Category Hierarchy — pure read-side helpers over the flat category list.

Invariants:
    - Levels are 0 (root), 1 and 2; a level-2 category cannot have children
    - build_category_tree preserves input order among siblings
    - An item whose parent is missing from the input becomes a root (parent soft-deleted)
    - Every input item appears exactly once; a parent cycle is broken at its first
      member in input order, which becomes a root
    - No IO: the procedure store enforces the write-side rules (depth, uniqueness, cascade)

Design Decisions:
    - Works on CategoryLike (Protocol) so API schemas and client DTOs share it
    - Tree built in one pass over an id index, not by recursive filtering
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from app.core.repository_protocols import CategoryLike

MAX_CATEGORY_LEVEL = 2

C = TypeVar("C", bound=CategoryLike)


@dataclass
class CategoryNode(Generic[C]):
    """A category with its direct children attached."""
    category: C
    children: list["CategoryNode[C]"] = field(default_factory=list)


def can_have_children(category: CategoryLike) -> bool:
    return category.level < MAX_CATEGORY_LEVEL


def eligible_parents(
    categories: Iterable[C], editing_id: int | None = None,
) -> list[C]:
    """Categories that may be chosen as parent, excluding the one being edited."""
    return [
        c for c in categories
        if can_have_children(c) and c.id_category != editing_id
    ]


def build_category_tree(categories: Sequence[C]) -> list[CategoryNode[C]]:
    """Nest the flat list into root nodes with children attached."""
    nodes = {c.id_category: CategoryNode(c) for c in categories}
    roots: list[CategoryNode[C]] = []
    for category in categories:
        node = nodes[category.id_category]
        parent = (
            nodes.get(category.id_parent)
            if category.id_parent is not None else None
        )
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.children.append(node)

    # Parent cycles are unreachable from any root: cut each at its first member.
    reached = {id(n) for _, n in walk_tree(roots)}
    for category in categories:
        node = nodes[category.id_category]
        if id(node) in reached:
            continue
        nodes[category.id_parent].children.remove(node)
        roots.append(node)
        reached.update(id(n) for _, n in walk_tree([node]))
    return roots


def subtree_task_count(node: CategoryNode) -> int:
    """Task count of the node plus every descendant."""
    return node.category.task_count + sum(
        subtree_task_count(child) for child in node.children
    )


def walk_tree(
    nodes: Iterable[CategoryNode[C]], depth: int = 0,
) -> Iterator[tuple[int, CategoryNode[C]]]:
    """Depth-first pre-order walk yielding (depth, node)."""
    for node in nodes:
        yield depth, node
        yield from walk_tree(node.children, depth + 1)
