"""
Exception types raised by lineargraph.

Absent labels are not errors: label lookups return None. Everything defined
here signals a caller contract violation and is left to propagate.
"""


class LinearGraphError(Exception):
    """Base class for all lineargraph errors."""


class VertexOutOfBoundsError(LinearGraphError, IndexError):
    """A vertex outside the (lower, upper) bounds of a dense table was requested."""

    def __init__(self, vertex, bounds):
        self.vertex = vertex
        self.bounds = bounds
        super().__init__(f"Vertex {vertex!r} outside bounds {bounds!r}")


class UndefinedElementError(LinearGraphError, LookupError):
    """A slot inside the bounds was never given a value."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Undefined element at vertex {vertex!r}")


class EmptyGraphError(LinearGraphError, LookupError):
    """A vertex was looked up on the empty graph sentinel."""


class DuplicateLabelError(LinearGraphError, ValueError):
    """Two nodes share a label while the STRICT duplicate policy is active."""

    def __init__(self, label):
        self.label = label
        super().__init__(f"Duplicate node label: {label!r}")
