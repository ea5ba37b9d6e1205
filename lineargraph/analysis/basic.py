"""
Basic algorithms over dense adjacency tables.

Every function accepts either a Graph or its bare adjacency table and works
directly on vertices, never on labels. Table-wide scans are O(V + E).
"""

import logging
from typing import Any, Callable, Iterable, List, Tuple, Type, Union

from ..config import Representation
from ..core.graph import Graph
from ..representation import get_mapping_class
from ..representation.base import Bounds, DenseMapping

logger = logging.getLogger(__name__)

TableLike = Union[Graph, DenseMapping]


def as_table(g: TableLike) -> DenseMapping:
    """Adjacency table of a Graph, or the table itself."""
    if isinstance(g, Graph):
        return g.adjacency
    return g


def table_vertices(g: TableLike) -> List[int]:
    return as_table(g).domain()


def table_edges(g: TableLike) -> List[Tuple[int, int]]:
    """All (v, w) pairs, by ascending v and then stored adjacency order."""
    table = as_table(g)
    return [(v, w) for v in table.domain() for w in table[v]]


def map_table(func: Callable[[int, Any], Any], g: TableLike) -> DenseMapping:
    """
    Apply ``func(vertex, value)`` to every entry of a table.

    Returns:
        New table with the same bounds and backend
    """
    table = as_table(g)
    return type(table).from_pairs(table.domain_bounds(), [(v, func(v, table[v])) for v in table.domain()])


def build_from_edge_list(bounds: Bounds, edges: Iterable[Tuple[int, int]],
                         representation: Union[Representation, Type[DenseMapping]] = Representation.ARRAY) -> DenseMapping:
    """
    Build an adjacency table by accumulating edges per source vertex.

    Each edge is pushed onto the front of its source's bucket, so within a
    bucket the most recently listed edge comes first.

    Args:
        bounds: Inclusive vertex range of the table
        edges: (source, target) vertex pairs
        representation: Backend enum, or a DenseMapping subclass

    Returns:
        Adjacency table covering ``bounds``

    Raises:
        VertexOutOfBoundsError: If a source vertex lies outside bounds
    """
    if isinstance(representation, type) and issubclass(representation, DenseMapping):
        mapping_cls = representation
    else:
        mapping_cls = get_mapping_class(representation)

    lower, upper = bounds
    domain = range(lower, upper + 1)
    buckets = mapping_cls.from_pairs(bounds, [(v, []) for v in domain])
    for v, w in edges:
        buckets[v].append(w)

    return mapping_cls.from_pairs(bounds, [(v, tuple(reversed(buckets[v]))) for v in domain])


def reverse_edges(g: TableLike) -> List[Tuple[int, int]]:
    return [(w, v) for v, w in table_edges(g)]


def transpose(g: TableLike) -> DenseMapping:
    """Adjacency table with every edge reversed."""
    table = as_table(g)
    return build_from_edge_list(table.domain_bounds(), reverse_edges(table), type(table))


def outdegree(g: TableLike) -> DenseMapping:
    """Table of successor counts per vertex."""
    return map_table(lambda _, ws: len(ws), g)


def indegree(g: TableLike) -> DenseMapping:
    """Table of predecessor counts per vertex."""
    return outdegree(transpose(g))


def is_empty(g: TableLike) -> bool:
    lower, upper = as_table(g).domain_bounds()
    return lower > upper
