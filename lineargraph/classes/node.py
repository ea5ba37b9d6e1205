"""
Labeled node representation.

A node is the user-facing description of a vertex: an arbitrary payload, a
label used as its identity, and the labels of the nodes it points to.
"""

from functools import total_ordering
from typing import Any, Iterable, Sequence, Tuple


def compare_labels(label_a: Any, label_b: Any) -> int:
    """
    Three-way comparison of two labels.

    Equality is checked first, so the result is only consistent with ``==``
    when the label type's ordering and equality agree.

    Args:
        label_a: Left label
        label_b: Right label

    Returns:
        0 if the labels are equal, -1 if label_a <= label_b, 1 otherwise
    """
    if label_a == label_b:
        return 0
    if label_a <= label_b:
        return -1
    return 1


@total_ordering
class Node:
    """
    A labeled, payload-carrying vertex description.

    Two nodes compare and hash purely by label; payload and successors are
    ignored, since the label is the vertex identity inside a graph.
    """

    __slots__ = ("_payload", "_label", "_successors")

    def __init__(self, payload: Any, label: Any, successors: Iterable[Any] = ()):
        """
        Args:
            payload: Arbitrary information stored at this node
            label: Totally ordered identifier of the node; must be hashable
                only if the node itself is hashed (set members, dict keys)
            successors: Labels of the nodes reachable by one edge from this node
        """
        self._payload = payload
        self._label = label
        self._successors = tuple(successors)

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def label(self) -> Any:
        return self._label

    @property
    def successors(self) -> Tuple[Any, ...]:
        return self._successors

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return compare_labels(self._label, other._label) == 0

    def __lt__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return compare_labels(self._label, other._label) < 0

    def __hash__(self):
        return hash(self._label)

    def __str__(self):
        return f"{self._payload!r}[{self._label!r}]"

    def __repr__(self):
        return f"Node(payload={self._payload!r}, label={self._label!r}, successors={list(self._successors)!r})"


def node_constructor(triple: Sequence) -> Node:
    """Build a Node from a (payload, label, successor_labels) triple."""
    payload, label, successors = triple
    return Node(payload, label, successors)
