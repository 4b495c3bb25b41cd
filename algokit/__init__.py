"""algokit - textbook sorting routines and a small graph library."""

__version__ = "0.1.0"

from .graphs import (
    AdjacencyList,
    DirectedAdjacencyList,
    DisconnectedGraphError,
    Edge,
    EdgeKind,
    Graph,
    SpanningTree,
    UndirectedAdjacencyList,
    Vertex,
    load_edge_list,
)
from .logging import configure_logging, get_logger, set_log_level
from .sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    validate_sorted,
)

__all__ = [
    "__version__",
    # Graphs
    "Vertex",
    "Edge",
    "EdgeKind",
    "AdjacencyList",
    "DirectedAdjacencyList",
    "UndirectedAdjacencyList",
    "Graph",
    "SpanningTree",
    "DisconnectedGraphError",
    "load_edge_list",
    # Sorting
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "shell_sort",
    "insertion_sort",
    "selection_sort",
    "bubble_sort",
    "validate_sorted",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
