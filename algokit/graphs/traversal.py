"""
Breadth-first traversal.

The traversal works on any neighbor mapping (vertex -> iterable of adjacent
vertices), so the adjacency-list containers and ad hoc dicts can share it.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
"""

from collections import deque
from typing import Hashable, Iterable, Mapping, Set


def breadth_first_search(
    neighbors: Mapping[Hashable, Iterable[Hashable]], start: Hashable
) -> Set[Hashable]:
    """
    Collect every vertex reachable from start.

    Probes all neighbors of the current vertex before moving on to the next
    queued vertex. Each reachable vertex is explored exactly once. The order
    in which same-level vertices are visited follows the iteration order of
    the neighbor collections and is not part of the contract.

    Args:
        neighbors: Mapping of vertex -> adjacent vertices. Vertices missing
            from the mapping have no outgoing adjacency.
        start: Vertex to start from. It is always part of the result, even
            when it does not appear in the mapping.

    Returns:
        Set of explored vertices, start included.

    Complexity: O(V + E) over the reachable part of the graph.

    Example:
        >>> breadth_first_search({1: [2], 2: [3], 4: [1]}, 1) == {1, 2, 3}
        True
    """
    explored = {start}
    frontier = deque([start])

    while frontier:
        current = frontier.popleft()
        for adjacent in neighbors.get(current, ()):
            if adjacent not in explored:
                explored.add(adjacent)
                frontier.append(adjacent)

    return explored
