"""
Depth-first traversal over dense vertices.

Traversals only need the vertex bounds and a function giving the successors
of a vertex, so they run equally over a Graph, a bare adjacency table or any
caller-supplied adjacency function.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Sequence

import numpy as np

from ..exceptions import VertexOutOfBoundsError
from ..representation.base import Bounds
from .basic import TableLike, as_table

logger = logging.getLogger(__name__)


@dataclass
class Tree:
    """A vertex of a depth-first spanning tree and its subtrees."""
    root: int
    children: List["Tree"] = field(default_factory=list)


def dfs_with(bounds: Bounds, adjacent: Callable[[int], Sequence[int]], roots: Iterable[int]) -> List[Tree]:
    """
    Depth-first spanning forest reachable from ``roots``.

    Roots are tried in order; a root already reached from an earlier one
    produces no tree. Successors are explored in the order ``adjacent``
    returns them. The walk uses an explicit stack, so deep graphs do not hit
    the recursion limit.

    Args:
        bounds: Inclusive vertex range
        adjacent: Successor function over vertices in bounds
        roots: Start vertices

    Returns:
        List of trees, one per root that was not yet visited

    Raises:
        VertexOutOfBoundsError: If a root or a successor lies outside bounds
    """
    lower, upper = bounds
    visited = np.zeros(max(0, upper - lower + 1), dtype=bool)

    def mark(vertex: int) -> bool:
        if vertex < lower or vertex > upper:
            raise VertexOutOfBoundsError(vertex, bounds)
        if visited[vertex - lower]:
            return False
        visited[vertex - lower] = True
        return True

    forest = []
    for root in roots:
        if not mark(root):
            continue
        tree = Tree(root)
        stack = [(tree, iter(adjacent(root)))]
        while stack:
            parent, successors = stack[-1]
            for w in successors:
                if mark(w):
                    child = Tree(w)
                    parent.children.append(child)
                    stack.append((child, iter(adjacent(w))))
                    break
            else:
                stack.pop()
        forest.append(tree)
    return forest


def dff_with(bounds: Bounds, adjacent: Callable[[int], Sequence[int]]) -> List[Tree]:
    """Depth-first forest covering every vertex, roots tried in ascending order."""
    lower, upper = bounds
    return dfs_with(bounds, adjacent, range(lower, upper + 1))


def dfs(g: TableLike, roots: Iterable[int]) -> List[Tree]:
    table = as_table(g)
    return dfs_with(table.domain_bounds(), table.__getitem__, roots)


def dff(g: TableLike) -> List[Tree]:
    table = as_table(g)
    forest = dff_with(table.domain_bounds(), table.__getitem__)
    logger.debug(f"Depth-first forest of {len(table)} vertices has {len(forest)} trees")
    return forest


def preorder(forest: Iterable[Tree]) -> List[int]:
    """Vertices of a forest, each parent before its children."""
    order = []
    stack = list(reversed(list(forest)))
    while stack:
        tree = stack.pop()
        order.append(tree.root)
        stack.extend(reversed(tree.children))
    return order


def postorder(forest: Iterable[Tree]) -> List[int]:
    """Vertices of a forest, each parent after its children."""
    order = []
    for top in forest:
        stack = [(top, False)]
        while stack:
            tree, expanded = stack.pop()
            if expanded:
                order.append(tree.root)
                continue
            stack.append((tree, True))
            stack.extend((child, False) for child in reversed(tree.children))
    return order
