"""Navigation tree construction and permission-gated pruning.

Pure data transforms with no I/O: build_tree turns flat module records into
a parent/child hierarchy, filter_accessible prunes it with an injected
accessibility predicate. Both are iterative so menu depth is unbounded.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Protocol

logger = logging.getLogger(__name__)


class ModuleLike(Protocol):
    """Fields build_tree reads from a module record (ModuleResult or ORM Module)."""

    id: int
    name: str
    description: str | None
    path: str | None
    icon: str | None
    order: int
    parent_id: int | None
    available_actions: Iterable[str]


@dataclass(frozen=True)
class NavigationNode:
    """One menu entry: module fields plus ordered children. Built per request."""

    id: int
    name: str
    description: str | None
    path: str | None
    icon: str | None
    order: int
    parent_id: int | None
    available_actions: tuple[str, ...] = ()
    children: tuple[NavigationNode, ...] = ()

    @classmethod
    def from_module(
        cls, module: ModuleLike, children: tuple[NavigationNode, ...] = ()
    ) -> NavigationNode:
        return cls(
            id=module.id,
            name=module.name,
            description=module.description,
            path=module.path,
            icon=module.icon,
            order=module.order,
            parent_id=module.parent_id,
            available_actions=tuple(module.available_actions),
            children=children,
        )


def sort_key(module: ModuleLike) -> tuple[int, int]:
    """Navigation order: order ascending, ties broken by id ascending."""
    return (module.order, module.id)


def build_tree(modules: Sequence[ModuleLike]) -> list[NavigationNode]:
    """Build root nodes (with nested children) from modules sorted by sort_key.

    Sibling order follows input order. A module whose parent is not in the
    input (deleted or invalid reference) becomes a root. Modules caught in a
    parent cycle are promoted to roots at the first member in input order so
    every module appears exactly once.
    """
    by_id = {m.id: m for m in modules}
    position = {m.id: i for i, m in enumerate(modules)}
    children_of: defaultdict[int, list[ModuleLike]] = defaultdict(list)
    roots: list[ModuleLike] = []

    for module in modules:
        parent_id = module.parent_id
        if parent_id is None or parent_id == module.id or parent_id not in by_id:
            if parent_id is not None:
                logger.debug(
                    "Module %s has unusable parent %s; placing at root",
                    module.id,
                    parent_id,
                )
            roots.append(module)
        else:
            children_of[parent_id].append(module)

    reachable: set[int] = set()

    def _mark(start: int) -> None:
        stack = [start]
        while stack:
            current = stack.pop()
            if current in reachable:
                continue
            reachable.add(current)
            stack.extend(child.id for child in children_of[current])

    for root in roots:
        _mark(root.id)

    for module in modules:
        if module.id in reachable:
            continue
        logger.warning(
            "Module %s is part of a parent cycle; placing at root", module.id
        )
        children_of[module.parent_id].remove(module)
        roots.append(module)
        _mark(module.id)

    roots.sort(key=lambda m: position[m.id])

    built: dict[int, NavigationNode] = {}
    stack: list[tuple[ModuleLike, bool]] = [(m, False) for m in reversed(roots)]
    while stack:
        module, expanded = stack.pop()
        kids = children_of[module.id]
        if expanded:
            built[module.id] = NavigationNode.from_module(
                module, tuple(built[k.id] for k in kids)
            )
        else:
            stack.append((module, True))
            stack.extend((k, False) for k in reversed(kids))
    return [built[m.id] for m in roots]


def filter_accessible(
    tree: Sequence[NavigationNode], is_accessible: Callable[[str], bool]
) -> list[NavigationNode]:
    """Return the tree pruned to nodes the user can reach.

    Post-order: a node is kept when is_accessible(node.name) is true or at
    least one of its children is kept. Kept nodes carry only kept children,
    so a group with no accessible descendants disappears entirely.
    """
    kept: dict[int, NavigationNode | None] = {}
    stack: list[tuple[NavigationNode, bool]] = [(n, False) for n in reversed(tree)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))
            continue
        children = tuple(
            survivor
            for child in node.children
            if (survivor := kept[id(child)]) is not None
        )
        if children or is_accessible(node.name):
            kept[id(node)] = replace(node, children=children)
        else:
            kept[id(node)] = None
    return [survivor for node in tree if (survivor := kept[id(node)]) is not None]


def flatten(tree: Sequence[NavigationNode]) -> list[NavigationNode]:
    """Pre-order list of every node in tree."""
    result: list[NavigationNode] = []
    stack = list(reversed(tree))
    while stack:
        node = stack.pop()
        result.append(node)
        stack.extend(reversed(node.children))
    return result
