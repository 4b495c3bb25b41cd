"""
Adjacency-list graph representation.

An AdjacencyList keeps three pieces of state:
- the vertex set, which also holds isolated vertices,
- the edge list in insertion order, which keeps the weights,
- a neighbor map (vertex -> set of adjacent vertices) derived from the edges.

The edge list is the source of truth. The neighbor map is only ever written
by ``_link`` when an edge is added, and :meth:`AdjacencyList.check_invariants`
rebuilds it from the edges to confirm the two agree.

Parallel edges are outside the model, but add_edge does not reject them;
callers that need uniqueness must enforce it.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .edge import Edge, EdgeKind
from .traversal import breadth_first_search
from .vertex import Vertex


class AdjacencyList:
    """
    Directed or undirected graph stored as vertices, edges and adjacency.

    Attributes:
        directed: If True, edges must be directed and only tail -> head
            adjacency is recorded; otherwise edges must be undirected and
            both directions are recorded.

    add_edge keeps the neighbor map in step with the edge list but does not
    verify it. check_invariants is a debugging aid that callers (and tests)
    run explicitly.

    Complexity:
        - add_vertex: O(1)
        - add_edge: O(1) amortized
        - degree: O(1)
        - breadth_first_search: O(V + E)

    Example:
        >>> from algokit.graphs import AdjacencyList, Edge, Vertex
        >>> a, b = Vertex(1), Vertex(2)
        >>> adj = AdjacencyList()
        >>> adj.add_edge(Edge.undirected(a, b))
        >>> adj.degree(b)
        1
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty adjacency list.

        Args:
            directed: If True, the list holds directed edges.
        """
        self.directed = directed
        self._vertices: Set[Vertex] = set()
        self._edges: List[Edge] = []
        self._neighbors: Dict[Vertex, Set[Vertex]] = {}

    @property
    def kind(self) -> EdgeKind:
        return EdgeKind.DIRECTED if self.directed else EdgeKind.UNDIRECTED

    @property
    def vertices(self) -> FrozenSet[Vertex]:
        """Read-only snapshot of the vertex set."""
        return frozenset(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Read-only snapshot of the edges in insertion order."""
        return tuple(self._edges)

    @property
    def num_vertices(self) -> int:
        """
        Number of vertices with recorded adjacency.

        Vertices added only through add_vertex, and never touched by an
        edge, are in ``vertices`` but are not counted here.
        """
        return len(self._neighbors)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def is_empty(self) -> bool:
        """True if there are neither vertices nor edges."""
        return not self._vertices and not self._edges

    def add_vertex(self, v: Vertex) -> None:
        """
        Add a vertex. Adding an equal vertex again has no effect.

        Raises:
            TypeError: If v is None.
        """
        if v is None:
            raise TypeError("Vertex must not be None")
        self._vertices.add(v)

    def add_edge(self, edge: Edge) -> None:
        """
        Add an edge together with both of its endpoints.

        Args:
            edge: Edge whose kind matches this list's directedness.

        Raises:
            TypeError: If edge is None.
            ValueError: If the edge is directed and this list is undirected,
                or the other way round.
        """
        if edge is None:
            raise TypeError("Edge must not be None")
        if edge.kind is not self.kind:
            raise ValueError(
                f"Cannot add a {edge.kind.value} edge to a {self.kind.value} adjacency list"
            )
        self.add_vertex(edge.first)
        self.add_vertex(edge.second)
        self._edges.append(edge)
        self._link(self._neighbors, edge)

    @staticmethod
    def _link(neighbors: Dict[Vertex, Set[Vertex]], edge: Edge) -> None:
        neighbors.setdefault(edge.first, set()).add(edge.second)
        if not edge.is_directed:
            neighbors.setdefault(edge.second, set()).add(edge.first)

    def neighbors(self, v: Vertex) -> FrozenSet[Vertex]:
        """
        Vertices adjacent to v (heads of v's out-edges when directed).

        Raises:
            KeyError: If v has no recorded adjacency.
        """
        if v not in self._neighbors:
            raise KeyError(f"Vertex {v} has no recorded adjacency")
        return frozenset(self._neighbors[v])

    def degree(self, v: Vertex) -> int:
        """
        Number of distinct neighbors of v.

        Raises:
            TypeError: If v is None.
            ValueError: If v has no recorded adjacency.
        """
        if v is None:
            raise TypeError("Vertex must not be None")
        if v not in self._neighbors:
            raise ValueError(f"Vertex {v} has no recorded adjacency")
        return len(self._neighbors[v])

    def total_edge_cost(self) -> float:
        """Sum of the weights of all edges."""
        return sum(edge.weight for edge in self._edges)

    def initial_vertex(self) -> Vertex:
        """
        An arbitrary vertex from the vertex set.

        Raises:
            RuntimeError: If the vertex set is empty.
        """
        if not self._vertices:
            raise RuntimeError("Adjacency list has no vertices to start from")
        return next(iter(self._vertices))

    def breadth_first_search(self, start: Optional[Vertex] = None) -> FrozenSet[Vertex]:
        """
        Set of vertices reachable from start.

        Args:
            start: Vertex to start from. If None, an arbitrary vertex from
                the vertex set is used.

        Returns:
            Explored vertices, start included. For a disconnected graph this
            is a strict subset of ``vertices``.

        Raises:
            RuntimeError: If start is None and there are no vertices.
        """
        if start is None:
            start = self.initial_vertex()
        return frozenset(breadth_first_search(self._neighbors, start))

    def check_invariants(self) -> None:
        """
        Verify that the derived state agrees with the edge list.

        Not called by any mutator; run it explicitly when debugging.

        Raises:
            RuntimeError: If an edge endpoint is missing from the vertex set,
                or the neighbor map differs from one rebuilt from the edges.
        """
        rebuilt: Dict[Vertex, Set[Vertex]] = {}
        for edge in self._edges:
            if edge.first not in self._vertices or edge.second not in self._vertices:
                raise RuntimeError(f"Edge {edge} has an endpoint outside the vertex set")
            self._link(rebuilt, edge)
        if rebuilt != self._neighbors:
            raise RuntimeError("Neighbor map diverged from the edge list")

    def __eq__(self, other):
        if not isinstance(other, AdjacencyList):
            return NotImplemented
        return (
            self.directed == other.directed
            and self._vertices == other._vertices
            and self._edges == other._edges
        )

    def __hash__(self):
        return hash((frozenset(self._vertices), tuple(self._edges)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(directed={self.directed}, "
            f"vertices={len(self._vertices)}, edges={len(self._edges)})"
        )

    def __str__(self) -> str:
        lines = [f"Vertices: {self.num_vertices}"]
        lines.extend(str(v) for v in sorted(self._vertices, key=lambda v: v.id))
        lines.append(f"Edges: {self.num_edges}")
        lines.extend(str(e) for e in self._edges)
        return "\n".join(lines)


class UndirectedAdjacencyList(AdjacencyList):
    """Adjacency list of undirected edges; each edge links both ways."""

    def __init__(self, edges: Iterable[Edge] = ()):
        super().__init__(directed=False)
        for edge in edges:
            self.add_edge(edge)


class DirectedAdjacencyList(AdjacencyList):
    """Adjacency list of directed edges; each edge links tail -> head."""

    def __init__(self, edges: Iterable[Edge] = ()):
        super().__init__(directed=True)
        for edge in edges:
            self.add_edge(edge)

    def add_directed_edge(self, edge: Edge) -> None:
        """Same as add_edge; named for the arc it records."""
        self.add_edge(edge)
