"""
LinearGraph - Labeled Directed Graphs with Dense Vertex Numbering

A Python library for building directed graphs out of labeled, payload-carrying
nodes and running linear-time algorithms over them. Nodes are sorted by label
and compacted into dense integer vertices; labels are resolved back to
vertices by binary search.

Main Classes:
    Node: Labeled vertex description with successor labels
    Graph: Immutable graph with two-way vertex/node mapping
    GraphConfig: Construction options (storage backend, duplicate labels)

Example:
    >>> from lineargraph import graph_from_edged_vertices, transpose
    >>> graph = graph_from_edged_vertices([("a", 1, [2]), ("b", 2, [1, 3])])
    >>> graph.vertices()
    [0, 1]
    >>> transpose(graph).values()
    [(1,), (0,)]
"""

__version__ = "0.1.0"

from lineargraph.classes.node import Node, compare_labels, node_constructor
from lineargraph.config import DEFAULT_CONFIG, DuplicateLabelPolicy, GraphConfig, Representation
from lineargraph.core.graph import EmptyGraph, Graph, graph_from_edged_vertices, mk_graph
from lineargraph.analysis.basic import indegree, is_empty, outdegree, reverse_edges, transpose
from lineargraph.analysis.traversal import dff, dfs
from lineargraph.exceptions import (
    DuplicateLabelError,
    EmptyGraphError,
    LinearGraphError,
    UndefinedElementError,
    VertexOutOfBoundsError,
)

__all__ = [
    'Node',
    'compare_labels',
    'node_constructor',
    'Graph',
    'EmptyGraph',
    'mk_graph',
    'graph_from_edged_vertices',
    'GraphConfig',
    'Representation',
    'DuplicateLabelPolicy',
    'DEFAULT_CONFIG',
    'transpose',
    'reverse_edges',
    'outdegree',
    'indegree',
    'is_empty',
    'dfs',
    'dff',
    'LinearGraphError',
    'VertexOutOfBoundsError',
    'UndefinedElementError',
    'EmptyGraphError',
    'DuplicateLabelError',
]
