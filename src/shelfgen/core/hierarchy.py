# ABOUTME: Series hierarchy builder: turns the flat node registry into a sorted forest.
# ABOUTME: Populates Series.children breadth-first from the parent pointers.

from collections import deque

from shelfgen.catalog.types import Series


def _by_name(node: Series) -> str:
    return node.name


def build_series_tree(series_nodes: dict[str, Series]) -> list[Series]:
    """Return the root nodes, sorted by name, with children filled in.

    Starting from the roots, each dequeued node gets every node whose parent
    is its name as children (sorted by name), and those children are queued
    in turn. Each node has one parent pointer, so every reachable node is
    visited once.
    """
    nodes = list(series_nodes.values())
    roots = sorted((node for node in nodes if node.parent is None), key=_by_name)

    queue = deque(roots)
    while queue:
        parent = queue.popleft()
        parent.children = sorted(
            (node for node in nodes if node.parent == parent.name), key=_by_name
        )
        queue.extend(parent.children)

    return roots
