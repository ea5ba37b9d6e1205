"""
Storage backends for dense vertex tables.

All backends implement the DenseMapping interface; the one used by a graph is
chosen through lineargraph.config.Representation when the graph is built.
"""

from typing import Dict, Type

from ..config import Representation
from .base import Bounds, DenseMapping, EMPTY_BOUNDS
from .array import ArrayMapping
from .hashmap import HashMapping

_BACKENDS: Dict[Representation, Type[DenseMapping]] = {
    Representation.ARRAY: ArrayMapping,
    Representation.HASHMAP: HashMapping,
}


def get_mapping_class(representation: Representation) -> Type[DenseMapping]:
    """Return the DenseMapping subclass implementing ``representation``."""
    try:
        return _BACKENDS[Representation(representation)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown representation: {representation!r}") from None


__all__ = [
    'Bounds',
    'DenseMapping',
    'EMPTY_BOUNDS',
    'ArrayMapping',
    'HashMapping',
    'get_mapping_class',
]
