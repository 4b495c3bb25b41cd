"""
Weighted graph edges.

An Edge joins two vertices and carries a weight (default 1.0). Directionality
is data: ``Edge.kind`` is an :class:`EdgeKind`, and the variant-specific
behaviour (what makes two edges the same edge, and when an edge crosses the
boundary of a vertex set) lives on the enum members.

Ordering and identity are deliberately separate:
- ``<``, ``<=``, ``>``, ``>=`` and :meth:`Edge.compare_to` look only at weight,
  so sorting a list of edges orders it by ascending weight.
- ``==`` and ``hash`` look only at the endpoints (and the kind), never at the
  weight, because parallel edges are not part of the model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Hashable

from .vertex import Vertex

DEFAULT_EDGE_WEIGHT = 1.0


class EdgeKind(Enum):
    """Directionality of an edge."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    def identity(self, first: Vertex, second: Vertex) -> Hashable:
        """
        Key that decides edge equality.

        Directed edges are the ordered pair (tail, head); undirected edges
        are the unordered pair, so (a, b) and (b, a) share a key.
        """
        if self is EdgeKind.DIRECTED:
            return (first, second)
        return frozenset((first, second))

    def crosses(self, first: Vertex, second: Vertex, vertices: AbstractSet[Vertex]) -> bool:
        """
        Whether an edge leaves the given vertex set.

        Undirected: exactly one endpoint is inside. Directed: the tail is
        inside and the head is outside (the directional frontier).
        """
        if self is EdgeKind.DIRECTED:
            return first in vertices and second not in vertices
        return (first in vertices) != (second in vertices)


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Weighted edge between two vertices.

    Build edges with :meth:`Edge.directed` or :meth:`Edge.undirected` rather
    than calling the constructor directly.

    Attributes:
        first: First endpoint (the tail of a directed edge).
        second: Second endpoint (the head of a directed edge).
        weight: Edge weight, default 1.0.
        kind: EdgeKind.DIRECTED or EdgeKind.UNDIRECTED.

    Raises:
        TypeError: If an endpoint is None or not a Vertex.
    """

    first: Vertex
    second: Vertex
    weight: float = DEFAULT_EDGE_WEIGHT
    kind: EdgeKind = EdgeKind.UNDIRECTED

    def __post_init__(self):
        for endpoint in (self.first, self.second):
            if endpoint is None:
                raise TypeError("Edge endpoints must not be None")
            if not isinstance(endpoint, Vertex):
                raise TypeError(f"Edge endpoints must be Vertex, got {type(endpoint).__name__}")
        if not isinstance(self.kind, EdgeKind):
            raise TypeError(f"Edge kind must be an EdgeKind, got {self.kind!r}")
        object.__setattr__(self, "weight", float(self.weight))

    @classmethod
    def directed(cls, tail: Vertex, head: Vertex, weight: float = DEFAULT_EDGE_WEIGHT) -> "Edge":
        """Arc from tail (origin) to head (destination)."""
        return cls(tail, head, weight, EdgeKind.DIRECTED)

    @classmethod
    def undirected(cls, v1: Vertex, v2: Vertex, weight: float = DEFAULT_EDGE_WEIGHT) -> "Edge":
        """Symmetric edge; Edge.undirected(a, b) == Edge.undirected(b, a)."""
        return cls(v1, v2, weight, EdgeKind.UNDIRECTED)

    @property
    def is_directed(self) -> bool:
        return self.kind is EdgeKind.DIRECTED

    @property
    def tail(self) -> Vertex:
        """Origin of a directed edge."""
        if not self.is_directed:
            raise TypeError("Undirected edges have no tail")
        return self.first

    @property
    def head(self) -> Vertex:
        """Destination of a directed edge."""
        if not self.is_directed:
            raise TypeError("Undirected edges have no head")
        return self.second

    def other(self, v: Vertex) -> Vertex:
        """
        Return the endpoint opposite to v.

        Args:
            v: One of this edge's endpoints.

        Returns:
            The other endpoint (v itself for a self-loop).

        Raises:
            TypeError: If v is None.
            ValueError: If v is not an endpoint of this edge.
        """
        if v is None:
            raise TypeError("Vertex must not be None")
        if v == self.first:
            return self.second
        if v == self.second:
            return self.first
        raise ValueError(f"Vertex {v} is not an endpoint of edge {self}")

    def crosses(self, vertices: AbstractSet[Vertex]) -> bool:
        """True if this edge leaves the vertex set (see EdgeKind.crosses)."""
        return self.kind.crosses(self.first, self.second, vertices)

    def compare_to(self, other: "Edge") -> int:
        """
        Three-way comparison by weight only.

        Returns:
            -1 if this edge is lighter, 1 if heavier, 0 for equal weights
            regardless of endpoints.
        """
        if self.weight < other.weight:
            return -1
        if self.weight > other.weight:
            return 1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.kind is other.kind and self._key() == other._key()

    def __hash__(self):
        return hash((self.kind, self._key()))

    def _key(self) -> Hashable:
        return self.kind.identity(self.first, self.second)

    def __str__(self) -> str:
        arrow = "->" if self.is_directed else "-"
        return f"{self.first}{arrow}{self.second} {self.weight}"
