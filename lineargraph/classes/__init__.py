"""
Core data classes for graph description.

This module contains the user-facing node type consumed by graph
construction.
"""

from .node import Node, compare_labels, node_constructor

__all__ = [
    'Node',
    'compare_labels',
    'node_constructor',
]
