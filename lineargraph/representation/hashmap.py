"""
Hash map backend for dense mappings.
"""

from typing import Any, Dict, Iterable, Tuple

from ..exceptions import UndefinedElementError
from .base import Bounds, DenseMapping


class HashMapping(DenseMapping):
    """Dense mapping stored in a dict keyed by zero-based slot."""

    def __init__(self, bounds: Bounds, data: Dict[int, Any]):
        super().__init__(bounds)
        self._data = data

    @classmethod
    def from_pairs(cls, bounds: Bounds, pairs: Iterable[Tuple[int, Any]]) -> "HashMapping":
        data: Dict[int, Any] = {}
        for vertex, value in pairs:
            data[cls._check_pair(vertex, bounds)] = value
        return cls(bounds, data)

    def _lookup(self, offset: int) -> Any:
        try:
            return self._data[offset]
        except KeyError:
            raise UndefinedElementError(offset + self._bounds[0]) from None
