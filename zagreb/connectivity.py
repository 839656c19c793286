"""Reachability, vertex-disjoint paths and k-connectivity checks.

Two strategies decide k-connectivity:

* ``APPROXIMATE`` combines shape shortcuts with a density threshold and a
  Zagreb-index ratio.  It is fast but only a heuristic.
* ``EXACT`` applies Menger's theorem: every pair of vertices must be joined by
  at least ``k`` internally vertex-disjoint paths.  Paths are extracted
  greedily (shortest path first, then its internal vertices are removed), so
  the count is a lower bound on the true maximum in general graphs but is
  correct on the structured families the theorems are evaluated on.

All functions accept a :class:`zagreb.graph.Graph` and never modify it; path
removal happens on a scratch copy of the adjacency mapping.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from itertools import combinations
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Union

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)

# Upper bound on path searches per vertex pair.
MAX_PATH_SEARCH_ATTEMPTS = 100


class ConnectivityStrategy(str, Enum):
    """Algorithm used to decide k-connectivity."""

    APPROXIMATE = "approximate"
    EXACT = "exact"

    @classmethod
    def resolve(cls, exact: Union[bool, "ConnectivityStrategy"]) -> "ConnectivityStrategy":
        if isinstance(exact, cls):
            return exact
        return cls.EXACT if exact else cls.APPROXIMATE


#####################################
# Breadth-first search              #
#####################################


def is_connected(graph: "Graph") -> bool:
    """Return ``True`` when every vertex is reachable from vertex 0."""

    n = graph.vertex_count()
    if n == 0:
        return True

    visited = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for neighbour in graph.neighbors(current):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return len(visited) == n


def find_path_in_subgraph(
    adjacency: Mapping[int, Iterable[int]],
    s: int,
    t: int,
) -> Optional[List[int]]:
    """Return a shortest ``s``-``t`` path in ``adjacency`` or ``None``.

    ``adjacency`` may be any vertex -> neighbours mapping, typically a working
    copy from which vertices have been cut off.  Neighbours are explored in
    ascending order so repeated searches are reproducible.
    """

    if s not in adjacency or t not in adjacency:
        return None

    parents: Dict[int, Optional[int]] = {s: None}
    queue = deque([s])
    while queue:
        current = queue.popleft()
        if current == t:
            path = [t]
            while path[-1] != s:
                path.append(parents[path[-1]])
            path.reverse()
            return path
        for neighbour in sorted(adjacency.get(current, ())):
            if neighbour not in parents:
                parents[neighbour] = current
                queue.append(neighbour)
    return None


#####################################
# Vertex-disjoint paths             #
#####################################


def _isolate_internal_vertices(adjacency: Dict[int, set], path: List[int]) -> None:
    for vertex in path[1:-1]:
        for neighbour in list(adjacency[vertex]):
            adjacency[vertex].discard(neighbour)
            adjacency[neighbour].discard(vertex)


def _greedy_path_count(adjacency: Dict[int, set], s: int, t: int, limit: int) -> int:
    """Count paths found by repeated search-and-remove, stopping at ``limit``."""

    found = 0
    attempts = 0
    while True:
        path = find_path_in_subgraph(adjacency, s, t)
        if path is None:
            break
        found += 1
        if found >= limit:
            break
        if attempts >= MAX_PATH_SEARCH_ATTEMPTS:
            logger.debug(
                "Stopped disjoint path search between %d and %d after %d attempts",
                s, t, attempts,
            )
            break
        attempts += 1
        _isolate_internal_vertices(adjacency, path)
    return found


def find_vertex_disjoint_paths(graph: "Graph", s: int, t: int) -> int:
    """Return the number of internally vertex-disjoint ``s``-``t`` paths found.

    Complete graphs, cycles and the two ends of a path graph are answered
    directly.  Otherwise paths are peeled off greedily from a scratch copy of
    the adjacency mapping, at most ``min(deg(s), deg(t))`` of them.  For
    adjacent vertices the edge ``st`` counts as one path and the search runs
    without it.  Returns 0 for ``s == t`` or unknown vertices.
    """

    n = graph.vertex_count()
    if s == t or not (0 <= s < n and 0 <= t < n):
        return 0

    if graph.is_complete():
        return n - 1
    if graph.is_cycle():
        return 2
    if graph.is_path() and graph.degree(s) == 1 and graph.degree(t) == 1:
        return 1

    max_paths = min(graph.degree(s), graph.degree(t))
    working = graph.adjacency_copy()

    if graph.has_edge(s, t):
        working[s].discard(t)
        working[t].discard(s)
        return 1 + _greedy_path_count(working, s, t, max_paths - 1)

    return _greedy_path_count(working, s, t, max_paths)


#####################################
# k-connectivity                    #
#####################################


def is_k_connected_approx(graph: "Graph", k: int) -> bool:
    """Heuristic k-connectivity test.

    After the necessary conditions (``k <= n - 1`` and ``min_degree >= k``) and
    the shape shortcuts, a graph is accepted when it has at least
    ``(n - 1) * k // 2 + 1`` edges, or when ``Z1 / e`` is not below
    ``k`` times the average degree.  May disagree with the exact test.
    """

    n = graph.vertex_count()
    if k > n - 1:
        return False
    if graph.min_degree() < k:
        return False
    if k == 1:
        return is_connected(graph)

    if graph.is_complete():
        return k <= n - 1
    if graph.is_cycle():
        return k <= 2
    if graph.is_path() or graph.is_star():
        return k <= 1

    e = graph.edge_count()
    density_threshold = (n - 1) * k // 2 + 1
    if e >= density_threshold:
        return True
    if e == 0:
        return False

    average_degree = 2.0 * e / n
    return graph.first_zagreb_index() / e >= k * average_degree


def is_k_connected_exact(graph: "Graph", k: int) -> bool:
    """Menger's-theorem k-connectivity test over every pair of vertices.

    Needs ``O(n^2)`` disjoint-path computations; meant for small and
    medium-sized graphs.
    """

    n = graph.vertex_count()
    if k > n - 1:
        return False
    if graph.min_degree() < k:
        return False
    if graph.is_complete():
        return True
    if k == 1:
        return is_connected(graph)

    for s, t in combinations(range(n), 2):
        paths = find_vertex_disjoint_paths(graph, s, t)
        if paths < k:
            logger.debug("Vertices %d and %d have only %d disjoint paths (k=%d)", s, t, paths, k)
            return False
    return True


_STRATEGIES = {
    ConnectivityStrategy.APPROXIMATE: is_k_connected_approx,
    ConnectivityStrategy.EXACT: is_k_connected_exact,
}


def is_k_connected(
    graph: "Graph",
    k: int,
    exact: Union[bool, ConnectivityStrategy] = False,
) -> bool:
    """Return whether ``graph`` is k-connected using the selected strategy.

    ``exact`` is either a boolean flag or a :class:`ConnectivityStrategy`.
    Complete graphs are answered before dispatching.
    """

    if graph.is_complete():
        return k <= graph.vertex_count() - 1
    strategy = ConnectivityStrategy.resolve(exact)
    logger.debug("Checking %d-connectivity with the %s strategy", k, strategy.value)
    return _STRATEGIES[strategy](graph, k)


def vertex_connectivity_estimate(
    graph: "Graph",
    exact: Union[bool, ConnectivityStrategy] = False,
    max_k: Optional[int] = None,
) -> int:
    """Return the largest ``k`` such that ``graph`` passes every check up to ``k``.

    ``max_k`` caps the search; by default it runs up to ``n - 1``.
    """

    upper = graph.vertex_count() - 1
    if max_k is not None:
        upper = min(upper, max_k)
    for k in range(1, upper + 1):
        if not is_k_connected(graph, k, exact):
            return k - 1
    return max(upper, 0)
