"""
Reading and writing graphs.

Two formats are supported:

Edge-list text (read only), as produced for MST exercises::

    4 3
    1 2 2.3
    1 3 3.677
    1 4 7.213

The header holds the vertex count and the edge count; each following line is
``vertex1 vertex2 weight``. :func:`load_edge_list` turns it into a
:class:`~algokit.graphs.mst.Graph`.

Adjacency JSON (read and write): a dict holding the directedness, the vertex
set and the edge list of an :class:`~algokit.graphs.core.AdjacencyList`.
Loading a dump yields a list equal to the original.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from algokit.logging import get_logger

from .core import AdjacencyList
from .edge import Edge, EdgeKind
from .mst import Graph
from .vertex import Vertex

logger = get_logger(__name__)

ADJACENCY_FORMAT_VERSION = "algokit-adjacency-1.0"

PathLike = Union[str, Path]


def load_edge_list(path: PathLike, directed: bool = False) -> Graph:
    """
    Load an edge-list text file into a Graph.

    Parameters
    ----------
    path : str or Path
        File with a ``num_vertices num_edges`` header followed by one
        ``vertex1 vertex2 weight`` record per line. Blank lines are skipped.
    directed : bool
        Build directed edges instead of undirected ones. The MST ignores
        direction either way.

    Returns
    -------
    Graph
        Graph with the header's vertex count and the records as edges, in
        file order.

    Raises
    ------
    ValueError
        If the header or any record is malformed, or an endpoint is not a
        non-negative integer.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        header = handle.readline().split()
        records = [line for line in handle if line.strip()]

    if len(header) < 2:
        raise ValueError(f"{path}: header must be 'num_vertices num_edges'")
    try:
        num_vertices = int(header[0])
        num_edges = int(header[1])
    except ValueError as exc:
        raise ValueError(f"{path}: header must hold two integers") from exc

    if records:
        try:
            data = np.loadtxt(records, dtype=float, ndmin=2)
        except ValueError as exc:
            raise ValueError(f"{path}: malformed edge record ({exc})") from exc
    else:
        data = np.empty((0, 3))

    if data.shape[1] != 3:
        raise ValueError(f"{path}: edge records need 3 columns, got {data.shape[1]}")

    endpoints = data[:, :2]
    if np.any(endpoints < 0) or np.any(endpoints != np.floor(endpoints)):
        raise ValueError(f"{path}: vertex ids must be non-negative integers")

    if len(data) != num_edges:
        logger.warning("%s: header declares %d edges, parsed %d", path, num_edges, len(data))

    kind = EdgeKind.DIRECTED if directed else EdgeKind.UNDIRECTED
    vertices: Dict[int, Vertex] = {}
    graph = Graph(num_vertices)
    for v1, v2, weight in data:
        first = vertices.setdefault(int(v1), Vertex(int(v1)))
        second = vertices.setdefault(int(v2), Vertex(int(v2)))
        graph.add_edge(Edge(first, second, float(weight), kind))

    logger.debug("loaded %s: %d vertices, %d edges", path, num_vertices, graph.num_edges)
    return graph


def adjacency_to_dict(adjacency: AdjacencyList) -> Dict[str, Any]:
    """
    Convert an AdjacencyList to a JSON-compatible dict.

    Vertices are listed by ascending id; edges keep insertion order and
    refer to their endpoints by id.
    """
    vertices = []
    for v in sorted(adjacency.vertices, key=lambda v: v.id):
        entry: Dict[str, Any] = {"id": v.id}
        if v.has_label:
            entry["label"] = v.label
        vertices.append(entry)

    return {
        "version": ADJACENCY_FORMAT_VERSION,
        "directed": adjacency.directed,
        "vertices": vertices,
        "edges": [
            {"first": e.first.id, "second": e.second.id, "weight": e.weight}
            for e in adjacency.edges
        ],
    }


def adjacency_from_dict(obj: Dict[str, Any]) -> AdjacencyList:
    """
    Rebuild an AdjacencyList from :func:`adjacency_to_dict` output.

    Raises
    ------
    ValueError
        If a required key is missing, the version is unknown, or an edge
        refers to a vertex id that is not listed.
    """
    version = obj.get("version", ADJACENCY_FORMAT_VERSION)
    if version != ADJACENCY_FORMAT_VERSION:
        raise ValueError(f"Unsupported adjacency format version: {version!r}")

    try:
        directed = bool(obj["directed"])
        vertex_entries = obj["vertices"]
        edge_entries = obj["edges"]
    except KeyError as exc:
        raise ValueError(f"Adjacency dict is missing key {exc}") from exc

    adjacency = AdjacencyList(directed=directed)
    by_id: Dict[int, Vertex] = {}
    for entry in vertex_entries:
        v = Vertex(int(entry["id"]), entry.get("label"))
        by_id[v.id] = v
        adjacency.add_vertex(v)

    kind = adjacency.kind
    for entry in edge_entries:
        try:
            first = by_id[int(entry["first"])]
            second = by_id[int(entry["second"])]
        except KeyError as exc:
            raise ValueError(f"Edge {entry} refers to unknown vertex {exc}") from exc
        adjacency.add_edge(Edge(first, second, float(entry.get("weight", 1.0)), kind))

    return adjacency


def save_adjacency_json(adjacency: AdjacencyList, path: PathLike) -> None:
    """Write an AdjacencyList to a JSON file."""
    with Path(path).open("w", encoding="utf-8") as handle:
        json.dump(adjacency_to_dict(adjacency), handle, indent=2)


def load_adjacency_json(path: PathLike) -> AdjacencyList:
    """Read an AdjacencyList written by :func:`save_adjacency_json`."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return adjacency_from_dict(json.load(handle))
