"""
Graph data model and algorithms for algokit.

This package provides:
- Vertex and Edge (directed or undirected, weighted) value types
- AdjacencyList containers with breadth-first search
- Graph with greedy minimum-spanning-tree construction
- Edge-list loading and adjacency JSON round-tripping

Vertices are identified by integer id. Edges order by weight and compare
equal by endpoints, so a list of edges sorts by ascending weight.
"""

from .core import AdjacencyList, DirectedAdjacencyList, UndirectedAdjacencyList
from .edge import DEFAULT_EDGE_WEIGHT, Edge, EdgeKind
from .io import (
    adjacency_from_dict,
    adjacency_to_dict,
    load_adjacency_json,
    load_edge_list,
    save_adjacency_json,
)
from .mst import DisconnectedGraphError, Graph, SpanningTree
from .traversal import breadth_first_search
from .vertex import Vertex

__all__ = [
    "Vertex",
    "Edge",
    "EdgeKind",
    "DEFAULT_EDGE_WEIGHT",
    "AdjacencyList",
    "DirectedAdjacencyList",
    "UndirectedAdjacencyList",
    "breadth_first_search",
    "Graph",
    "SpanningTree",
    "DisconnectedGraphError",
    "load_edge_list",
    "adjacency_to_dict",
    "adjacency_from_dict",
    "save_adjacency_json",
    "load_adjacency_json",
]

# Example usage:
# from algokit.graphs import Edge, Graph, Vertex
#
# g = Graph(3)
# g.add_edge(Edge.undirected(Vertex(1), Vertex(2), 2.5))
# g.add_edge(Edge.undirected(Vertex(2), Vertex(3), 1.0))
# g.min_spanning_tree().total_cost  # 3.5
