"""
Graph algorithms over the dense vertex representation.

This module contains degree, transpose and emptiness primitives along with
depth-first search and forest construction.
"""

from .basic import (
    table_vertices,
    table_edges,
    as_table,
    map_table,
    build_from_edge_list,
    reverse_edges,
    transpose,
    outdegree,
    indegree,
    is_empty,
)
from .traversal import Tree, dfs, dfs_with, dff, dff_with, preorder, postorder

__all__ = [
    'table_vertices',
    'table_edges',
    'as_table',
    'map_table',
    'build_from_edge_list',
    'reverse_edges',
    'transpose',
    'outdegree',
    'indegree',
    'is_empty',
    'Tree',
    'dfs',
    'dfs_with',
    'dff',
    'dff_with',
    'preorder',
    'postorder',
]
