"""
Label indexer: compaction of labeled nodes into dense vertices.

Nodes are sorted by label and numbered by sort position. Labels are resolved
back to vertices by binary search over the sorted key table, which is what
lets successor labels be turned into dense adjacency lists.
"""

import logging
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, Tuple, Type

from ..classes.node import Node, compare_labels
from ..config import DuplicateLabelPolicy
from ..exceptions import DuplicateLabelError
from ..representation.base import Bounds, DenseMapping

logger = logging.getLogger(__name__)


_label_order = cmp_to_key(compare_labels)


class LabelIndex:
    """
    Sorted label index over a fixed node list.

    Holds the bounds, the vertex -> node table and the vertex -> label table
    produced by ``index_nodes``. All lookups are read-only.
    """

    def __init__(self, bounds: Bounds, vertex_map: DenseMapping, key_map: DenseMapping,
                 aNode_sorted: List[Node]):
        self.bounds = bounds
        self.vertex_map = vertex_map
        self.key_map = key_map
        self.aNode_sorted = aNode_sorted

    @property
    def max_vertex(self) -> int:
        return self.bounds[1]

    def numbered_nodes(self) -> List[Tuple[int, Node]]:
        """Pairs of (vertex, node) in ascending vertex order."""
        return list(enumerate(self.aNode_sorted))

    def vertex_to_node(self, vertex: int) -> Node:
        return self.vertex_map[vertex]

    def resolve(self, label: Any) -> Optional[int]:
        """
        Binary search for the vertex carrying ``label``.

        On a match the search keeps narrowing to the left, so when several
        nodes share a label the lowest of their vertices is returned.

        Args:
            label: Label to look up

        Returns:
            The vertex, or None if no node has this label
        """
        low, high = 0, self.max_vertex
        found = None
        while low <= high:
            mid = (low + high) // 2
            order = compare_labels(label, self.key_map[mid])
            if order < 0:
                high = mid - 1
            elif order > 0:
                low = mid + 1
            else:
                found = mid
                high = mid - 1
        return found


def _find_duplicate_labels(aNode_sorted: List[Node]) -> List[Any]:
    """Labels occurring more than once; relies on the input being sorted."""
    duplicates = []
    for previous, current in zip(aNode_sorted, aNode_sorted[1:]):
        if compare_labels(previous.label, current.label) == 0:
            if not duplicates or compare_labels(duplicates[-1], current.label) != 0:
                duplicates.append(current.label)
    return duplicates


def index_nodes(nodes: Iterable[Node], mapping_cls: Type[DenseMapping],
                duplicate_policy: DuplicateLabelPolicy = DuplicateLabelPolicy.LOWEST) -> LabelIndex:
    """
    Sort nodes by label and assign each a dense vertex.

    Args:
        nodes: Finite iterable of nodes, in any order
        mapping_cls: DenseMapping backend for the key and vertex tables
        duplicate_policy: What to do when labels repeat

    Returns:
        LabelIndex over the sorted nodes

    Raises:
        DuplicateLabelError: If labels repeat under the STRICT policy
    """
    aNode = list(nodes)
    max_v = len(aNode) - 1
    bounds = (0, max_v)

    # sorted() is stable, equal labels keep their input order
    aNode_sorted = sorted(aNode, key=lambda node: _label_order(node.label))

    duplicates = _find_duplicate_labels(aNode_sorted)
    if duplicates:
        if duplicate_policy is DuplicateLabelPolicy.STRICT:
            raise DuplicateLabelError(duplicates[0])
        logger.warning(f"{len(duplicates)} duplicated labels, resolving each to its lowest vertex")

    numbered_nodes = list(enumerate(aNode_sorted))
    key_map = mapping_cls.from_pairs(bounds, [(v, node.label) for v, node in numbered_nodes])
    vertex_map = mapping_cls.from_pairs(bounds, numbered_nodes)

    logger.debug(f"Indexed {len(aNode_sorted)} nodes into bounds {bounds}")
    return LabelIndex(bounds, vertex_map, key_map, aNode_sorted)


def build_adjacency(index: LabelIndex, mapping_cls: Type[DenseMapping]) -> DenseMapping:
    """
    Resolve every node's successor labels into a dense adjacency table.

    Successor labels that match no node are dropped. The remaining vertices
    keep the order of the node's successor list.
    """
    pairs = []
    nDangling = 0
    for vertex, node in index.numbered_nodes():
        neighbours = []
        for label in node.successors:
            target = index.resolve(label)
            if target is None:
                nDangling += 1
            else:
                neighbours.append(target)
        pairs.append((vertex, tuple(neighbours)))

    if nDangling:
        logger.debug(f"Dropped {nDangling} dangling successor references")

    return mapping_cls.from_pairs(index.bounds, pairs)
