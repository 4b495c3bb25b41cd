"""
Minimum spanning tree over an edge list.

Graph grows a tree Prim-style from a seed vertex: each round it rescans the
whole edge list for edges with exactly one endpoint in the tree, stably
sorts those candidates by weight and takes the lightest. Rescanning instead
of keeping a priority frontier makes this O(V * E log E), so it is meant for
small graphs.

Vertices are matched by id only and edge direction is ignored; a directed
edge is a candidate whichever of its endpoints is already in the tree.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from dataclasses import dataclass
from typing import List, Set, Tuple

from algokit.logging import get_logger
from algokit.sorting import merge_sort

from .edge import Edge

logger = get_logger(__name__)


class DisconnectedGraphError(RuntimeError):
    """No edge leaves the partial spanning tree before it spans the graph."""


@dataclass(frozen=True)
class SpanningTree:
    """
    Edges chosen by Graph.min_spanning_tree, in selection order.

    Attributes:
        edges: Tree edges; the first one touches the seed vertex.
    """

    edges: Tuple[Edge, ...]

    @property
    def total_cost(self) -> float:
        """Sum of the tree edge weights."""
        return sum(edge.weight for edge in self.edges)

    @property
    def truncated_cost(self) -> int:
        """
        Sum of the weights in an integer accumulator.

        The running total is truncated toward zero after every addition, so
        fractional parts are lost edge by edge. Weights 2.3, 3.677 and 7.213
        give 12, where total_cost gives 13.19.
        """
        cost = 0
        for edge in self.edges:
            cost = int(cost + edge.weight)
        return cost

    def __len__(self) -> int:
        return len(self.edges)


class Graph:
    """
    Fixed number of vertices plus an append-only edge list.

    Vertex ids are expected to run from 1 to num_vertices. The graph keeps
    no vertex set or adjacency; it exists to compute spanning trees.

    Args:
        num_vertices: Number of vertices the tree must span. Must be positive.

    Raises:
        ValueError: If num_vertices is not positive.

    Example:
        >>> from algokit.graphs import Edge, Graph, Vertex
        >>> g = Graph(3)
        >>> g.add_edge(Edge.undirected(Vertex(1), Vertex(2), 1.0))
        >>> g.add_edge(Edge.undirected(Vertex(2), Vertex(3), 2.0))
        >>> g.min_spanning_tree().total_cost
        3.0
    """

    def __init__(self, num_vertices: int):
        if num_vertices <= 0:
            raise ValueError(f"Graph needs a positive number of vertices, got {num_vertices}")
        self.num_vertices = num_vertices
        self._edges: List[Edge] = []

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def add_edge(self, edge: Edge) -> None:
        """
        Append an edge.

        Raises:
            TypeError: If edge is None.
        """
        if edge is None:
            raise TypeError("Edge must not be None")
        self._edges.append(edge)

    def min_spanning_tree(self, seed: int = 1) -> SpanningTree:
        """
        Grow a minimum spanning tree from the seed vertex.

        Ties between equal-weight candidates go to the edge that comes first
        in the edge list, so the result is reproducible.

        Args:
            seed: Id of the vertex the tree starts from.

        Returns:
            SpanningTree with num_vertices - 1 edges for a connected graph
            whose vertex ids are 1..num_vertices.

        Raises:
            ValueError: If seed is negative.
            DisconnectedGraphError: If no edge leaves the tree before it
                covers num_vertices vertices. A seed that touches no edge
                is an isolated vertex and fails this way on the first round.

        Complexity: O(V * E log E).
        """
        if seed < 0:
            raise ValueError(f"Seed vertex id must be non-negative, got {seed}")

        tree_vertices: Set[int] = {seed}
        tree_edges: List[Edge] = []

        while len(tree_vertices) < self.num_vertices:
            candidates = [
                edge
                for edge in self._edges
                if (edge.first.id in tree_vertices) != (edge.second.id in tree_vertices)
            ]
            if not candidates:
                raise DisconnectedGraphError(
                    f"Graph is disconnected: no edge leaves the tree after "
                    f"{len(tree_vertices)} of {self.num_vertices} vertices"
                )

            merge_sort(candidates)
            lightest = candidates[0]
            logger.debug(
                "round %d: %d candidates, taking %s", len(tree_edges) + 1, len(candidates), lightest
            )

            tree_edges.append(lightest)
            tree_vertices.add(lightest.first.id)
            tree_vertices.add(lightest.second.id)

        return SpanningTree(edges=tuple(tree_edges))

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, edges={len(self._edges)})"

    def __str__(self) -> str:
        lines = [f"Vertices: {self.num_vertices}"]
        lines.extend(str(e) for e in self._edges)
        return "\n".join(lines)
