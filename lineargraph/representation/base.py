"""
Dense mapping capability interface.

A dense mapping is a fixed-bounds, array-like table keyed by vertex. Every
storage backend implements the same small set of operations so that graph
construction and the algorithms never depend on how a table is stored.
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Tuple

from ..exceptions import VertexOutOfBoundsError

Bounds = Tuple[int, int]

EMPTY_BOUNDS: Bounds = (0, -1)


class DenseMapping(ABC):
    """
    Fixed-bounds table with O(1) lookup by vertex.

    Subclasses provide storage via ``from_pairs`` and ``_lookup``; bounds
    checking, enumeration and comparison live here.
    """

    def __init__(self, bounds: Bounds):
        lower, upper = bounds
        self._bounds: Bounds = (int(lower), int(upper))

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def empty(cls) -> "DenseMapping":
        """Return a table with inverted bounds and no elements."""
        return cls.from_pairs(EMPTY_BOUNDS, [])

    @classmethod
    @abstractmethod
    def from_pairs(cls, bounds: Bounds, pairs: Iterable[Tuple[int, Any]]) -> "DenseMapping":
        """
        Build a table from (vertex, value) pairs.

        Args:
            bounds: Inclusive (lower, upper) index range
            pairs: Iterable of (vertex, value); a repeated vertex keeps its last value

        Returns:
            A new table of the implementing backend

        Raises:
            VertexOutOfBoundsError: If a pair's vertex lies outside bounds
        """

    # ========================================================================
    # QUERIES
    # ========================================================================

    @abstractmethod
    def _lookup(self, offset: int) -> Any:
        """Return the value at ``offset`` = vertex - lower, already bounds-checked."""

    def __getitem__(self, vertex: int) -> Any:
        return self._lookup(self._offset(vertex))

    def domain(self) -> List[int]:
        """Ascending list of every index inside the bounds."""
        lower, upper = self._bounds
        return list(range(lower, upper + 1))

    def domain_bounds(self) -> Bounds:
        return self._bounds

    def values(self) -> List[Any]:
        return [self[v] for v in self.domain()]

    def items(self) -> List[Tuple[int, Any]]:
        return [(v, self[v]) for v in self.domain()]

    def is_empty(self) -> bool:
        lower, upper = self._bounds
        return lower > upper

    def __len__(self) -> int:
        lower, upper = self._bounds
        return max(0, upper - lower + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(self.domain())

    def __contains__(self, vertex) -> bool:
        try:
            self._offset(vertex)
        except (TypeError, VertexOutOfBoundsError):
            return False
        return True

    def __eq__(self, other):
        if not isinstance(other, DenseMapping):
            return NotImplemented
        return self._bounds == other._bounds and self.values() == other.values()

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(bounds={self._bounds!r}, values={self.values()!r})"

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _offset(self, vertex) -> int:
        """Translate a vertex into a zero-based slot, raising outside bounds."""
        index = operator.index(vertex)
        lower, upper = self._bounds
        if index < lower or index > upper:
            raise VertexOutOfBoundsError(vertex, self._bounds)
        return index - lower

    @staticmethod
    def _check_pair(vertex, bounds: Bounds) -> int:
        index = operator.index(vertex)
        lower, upper = bounds
        if index < lower or index > upper:
            raise VertexOutOfBoundsError(vertex, bounds)
        return index - lower
