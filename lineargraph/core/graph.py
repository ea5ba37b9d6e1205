"""
Graph over labeled nodes with a dense integer representation.

This module provides the externally visible graph: the dense adjacency table
plus the two-way mapping between vertices and nodes.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..classes.node import Node, node_constructor
from ..config import DEFAULT_CONFIG, GraphConfig, Representation
from ..exceptions import EmptyGraphError
from ..representation import get_mapping_class
from ..representation.base import Bounds, DenseMapping
from .indexer import LabelIndex, build_adjacency, index_nodes

logger = logging.getLogger(__name__)


class Graph:
    """
    Immutable directed graph of labeled nodes.

    Vertices are the dense integers 0..n-1 assigned by ascending label, so
    vertex order and label order coincide. The graph keeps:
    - the adjacency table mapping each vertex to its successor vertices
    - the sorted node table behind vertex -> node lookup
    - the sorted key table behind label -> vertex binary search
    """

    def __init__(self, adjacency: DenseMapping, index: LabelIndex, config: GraphConfig = DEFAULT_CONFIG):
        """
        Args:
            adjacency: Dense table of successor vertex lists
            index: Label index the adjacency table was resolved against
            config: Options the graph was built with
        """
        self._adjacency = adjacency
        self._index = index
        self.config = config

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node], config: Optional[GraphConfig] = None) -> "Graph":
        """
        Build a graph from a finite list of nodes.

        Successor labels that do not belong to any node are dropped silently.

        Args:
            nodes: Nodes in any order
            config: Construction options, DEFAULT_CONFIG when omitted

        Returns:
            The constructed graph
        """
        config = config or DEFAULT_CONFIG
        mapping_cls = get_mapping_class(config.representation)

        index = index_nodes(nodes, mapping_cls, config.duplicate_policy)
        adjacency = build_adjacency(index, mapping_cls)

        graph = Graph(adjacency, index, config)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Built graph with {graph.get_vertex_count()} vertices and {graph.get_edge_count()} edges")
        return graph

    @classmethod
    def empty(cls, config: Optional[GraphConfig] = None) -> "EmptyGraph":
        """Return the empty graph sentinel for the configured representation."""
        config = config or DEFAULT_CONFIG
        return EmptyGraph.instance(config.representation)

    # ========================================================================
    # LOOKUPS
    # ========================================================================

    def vertex_to_node(self, vertex: int) -> Node:
        """
        Get the node stored at a vertex.

        Raises:
            VertexOutOfBoundsError: If the vertex lies outside bounds()
        """
        return self._index.vertex_to_node(vertex)

    def node_to_vertex(self, node: Node) -> Optional[int]:
        """Get the vertex of a node by its label, or None if absent."""
        return self._index.resolve(node.label)

    def label_to_vertex(self, label: Any) -> Optional[int]:
        """Get the vertex carrying a label, or None if absent."""
        return self._index.resolve(label)

    # ========================================================================
    # ENUMERATION
    # ========================================================================

    @property
    def adjacency(self) -> DenseMapping:
        """The internal vertex -> successor vertices table; each entry is a tuple."""
        return self._adjacency

    def nodes(self) -> List[Node]:
        """Nodes in ascending vertex (and label) order."""
        return [self.vertex_to_node(v) for v in self._adjacency.domain()]

    def vertices(self) -> List[int]:
        return self._adjacency.domain()

    def edges(self) -> List[Tuple[Node, Node]]:
        """Edges as (source node, target node) pairs."""
        return [(self.vertex_to_node(v), self.vertex_to_node(w)) for v, w in self.vedges()]

    def vedges(self) -> List[Tuple[int, int]]:
        """Edges as (source vertex, target vertex) pairs."""
        return [(v, w) for v in self._adjacency.domain() for w in self._adjacency[v]]

    def adjacent_to(self, vertex: int) -> List[int]:
        """
        Successor vertices of a vertex, in stored order.

        Raises:
            VertexOutOfBoundsError: If the vertex lies outside bounds()
        """
        return list(self._adjacency[vertex])

    def bounds(self) -> Bounds:
        return self._adjacency.domain_bounds()

    def is_empty(self) -> bool:
        lower, upper = self.bounds()
        return lower > upper

    def get_vertex_count(self) -> int:
        return len(self._adjacency)

    def get_edge_count(self) -> int:
        return sum(len(ws) for ws in self._adjacency.values())

    def __len__(self) -> int:
        return self.get_vertex_count()

    def __contains__(self, item) -> bool:
        if isinstance(item, Node):
            return self.node_to_vertex(item) is not None
        return self.label_to_vertex(item) is not None

    def __repr__(self):
        return (f"{type(self).__name__}(vertices={self.get_vertex_count()}, "
                f"edges={self.get_edge_count()}, representation={self.config.representation.value})")


class EmptyGraph(Graph):
    """
    The "no graph" sentinel.

    Unlike a graph built from an empty node list, asking the sentinel for the
    node at a vertex is an error rather than an out-of-bounds lookup.
    """

    _instances: Dict[Representation, "EmptyGraph"] = {}

    @classmethod
    def instance(cls, representation: Representation) -> "EmptyGraph":
        representation = Representation(representation)
        if representation not in cls._instances:
            mapping_cls = get_mapping_class(representation)
            index = LabelIndex(mapping_cls.empty().domain_bounds(), mapping_cls.empty(),
                               mapping_cls.empty(), [])
            cls._instances[representation] = cls(mapping_cls.empty(), index,
                                                 GraphConfig(representation=representation))
        return cls._instances[representation]

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node], config: Optional[GraphConfig] = None) -> "Graph":
        raise TypeError("EmptyGraph cannot be built from nodes, use Graph.empty()")

    def vertex_to_node(self, vertex: int) -> Node:
        raise EmptyGraphError(f"Empty graph has no node at vertex {vertex!r}")

    def node_to_vertex(self, node: Node) -> Optional[int]:
        return None

    def label_to_vertex(self, label: Any) -> Optional[int]:
        return None


def mk_graph(nodes: Iterable[Node], config: Optional[GraphConfig] = None) -> Graph:
    """Build a graph from nodes; see Graph.from_nodes."""
    return Graph.from_nodes(nodes, config)


def graph_from_edged_vertices(triples: Iterable[Sequence[Any]], config: Optional[GraphConfig] = None) -> Graph:
    """
    Build a graph from (payload, label, successor_labels) triples.

    Example:
        >>> g = graph_from_edged_vertices([("a", 1, [2]), ("b", 2, [1, 3])])
        >>> g.vedges()
        [(0, 1), (1, 0)]
    """
    return mk_graph((node_constructor(triple) for triple in triples), config)
