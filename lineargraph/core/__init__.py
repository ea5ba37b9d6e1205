"""
Core graph data structures.

This module contains the label indexer and the graph built on top of it.
"""

from .indexer import LabelIndex, index_nodes, build_adjacency
from .graph import Graph, EmptyGraph, mk_graph, graph_from_edged_vertices

__all__ = [
    'LabelIndex',
    'index_nodes',
    'build_adjacency',
    'Graph',
    'EmptyGraph',
    'mk_graph',
    'graph_from_edged_vertices',
]
