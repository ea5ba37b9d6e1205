"""
Array backend for dense mappings.

Values live in a one-dimensional numpy object array sized to the bounds.
"""

from typing import Any, Iterable, Tuple

import numpy as np

from ..exceptions import UndefinedElementError
from .base import Bounds, DenseMapping

_UNDEFINED = object()


class ArrayMapping(DenseMapping):
    """Dense mapping stored in a numpy array with an index offset."""

    def __init__(self, bounds: Bounds, data: np.ndarray):
        super().__init__(bounds)
        self._data = data

    @classmethod
    def from_pairs(cls, bounds: Bounds, pairs: Iterable[Tuple[int, Any]]) -> "ArrayMapping":
        lower, upper = bounds
        data = np.empty(max(0, upper - lower + 1), dtype=object)
        data.fill(_UNDEFINED)
        for vertex, value in pairs:
            data[cls._check_pair(vertex, bounds)] = value
        return cls(bounds, data)

    def _lookup(self, offset: int) -> Any:
        value = self._data[offset]
        if value is _UNDEFINED:
            raise UndefinedElementError(offset + self._bounds[0])
        return value

    def to_numpy(self) -> np.ndarray:
        """
        Copy of the backing array.

        Integer-valued tables (degree tables, for instance) come back with an
        integer dtype; anything else stays an object array.
        """
        values = self.values()
        if values and all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in values):
            return np.asarray(values, dtype=np.int64)
        result = np.empty(len(values), dtype=object)
        for i, value in enumerate(values):
            result[i] = value
        return result
