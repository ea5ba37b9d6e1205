"""
Construction-time options for lineargraph graphs.

Options are passed explicitly when a graph is built and never change for the
lifetime of that graph.
"""

from dataclasses import dataclass
from enum import Enum


class Representation(Enum):
    """Available storage backends for dense vertex tables."""
    ARRAY = "array"
    HASHMAP = "hashmap"


class DuplicateLabelPolicy(Enum):
    """How the label indexer treats nodes that share a label."""
    LOWEST = "lowest"   # resolve to the lowest vertex carrying the label
    STRICT = "strict"   # reject the node list


@dataclass(frozen=True)
class GraphConfig:
    """
    Bundle of construction options.

    Attributes:
        representation: Backend used for the adjacency, key and vertex tables
        duplicate_policy: Behaviour when several nodes share a label
    """
    representation: Representation = Representation.ARRAY
    duplicate_policy: DuplicateLabelPolicy = DuplicateLabelPolicy.LOWEST


DEFAULT_CONFIG = GraphConfig()
