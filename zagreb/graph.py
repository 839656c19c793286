"""Adjacency-set graph engine with degree metrics and shape predicates.

:class:`Graph` stores a simple undirected graph on the vertices
``0 .. n-1``.  Edges can only be inserted; every query is read-only.  The
connectivity routines and the Zagreb-index theorems live in
:mod:`zagreb.connectivity` and :mod:`zagreb.theorems` and are exposed here as
thin methods so callers only ever deal with one object.
"""

from __future__ import annotations

import operator
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from . import connectivity, theorems
from .errors import InvalidVertex, SelfLoop

Adjacency = Dict[int, Set[int]]


class Graph:
    """Simple undirected graph with a fixed vertex set."""

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Vertex count must be an integer, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")
        self._n_vertices = n
        self._n_edges = 0
        self._adjacency: Adjacency = {v: set() for v in range(n)}

    def __repr__(self) -> str:
        return f"Graph(vertices={self._n_vertices}, edges={self._n_edges})"

    def _check_vertex(self, v: int) -> int:
        try:
            index = operator.index(v)
        except TypeError:
            raise InvalidVertex(v, self._n_vertices) from None
        if not 0 <= index < self._n_vertices:
            raise InvalidVertex(v, self._n_vertices)
        return index

    #####################################
    # Adjacency store                   #
    #####################################

    def add_edge(self, u: int, v: int) -> None:
        """Insert the undirected edge ``{u, v}``.

        Inserting an edge that already exists is a no-op.  Invalid input is
        rejected before anything is modified: :class:`InvalidVertex` for an
        out-of-range endpoint, :class:`SelfLoop` when ``u == v``.
        """

        u = self._check_vertex(u)
        v = self._check_vertex(v)
        if u == v:
            raise SelfLoop(u)
        if v in self._adjacency[u]:
            return
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)
        self._n_edges += 1

    def degree(self, v: int) -> int:
        """Return the number of neighbours of ``v``."""

        v = self._check_vertex(v)
        return len(self._adjacency[v])

    def neighbors(self, v: int) -> FrozenSet[int]:
        """Return a read-only snapshot of the neighbours of ``v``."""

        v = self._check_vertex(v)
        return frozenset(self._adjacency[v])

    def has_edge(self, u: int, v: int) -> bool:
        return v in self._adjacency.get(u, ())

    def edges(self) -> List[Tuple[int, int]]:
        """Return every edge once as a sorted ``(u, v)`` pair with ``u < v``."""

        return [
            (u, v)
            for u in range(self._n_vertices)
            for v in sorted(self._adjacency[u])
            if u < v
        ]

    def adjacency_copy(self) -> Adjacency:
        """Return a deep copy of the adjacency mapping.

        Path searches that delete vertices work on such a copy so that the
        graph itself is never touched.
        """

        return {v: set(neighbours) for v, neighbours in self._adjacency.items()}

    #####################################
    # Basic metrics                     #
    #####################################

    def vertex_count(self) -> int:
        return self._n_vertices

    def edge_count(self) -> int:
        return self._n_edges

    def degree_sequence(self) -> List[int]:
        """Return the degrees indexed by vertex id."""

        return [len(self._adjacency[v]) for v in range(self._n_vertices)]

    def min_degree(self) -> int:
        """Return the minimum vertex degree (0 for the empty graph)."""

        return min(self.degree_sequence(), default=0)

    def max_degree(self) -> int:
        """Return the maximum vertex degree (0 for the empty graph)."""

        return max(self.degree_sequence(), default=0)

    def average_degree(self) -> float:
        if self._n_vertices == 0:
            return 0.0
        return 2.0 * self._n_edges / self._n_vertices

    def first_zagreb_index(self) -> int:
        """Return the first Zagreb index ``sum(deg(v) ** 2)``."""

        return sum(degree * degree for degree in self.degree_sequence())

    #####################################
    # Shape predicates                  #
    #####################################

    # Degree-signature checks, used as shortcuts by the connectivity and
    # Hamiltonicity routines.

    def is_complete(self) -> bool:
        """Return ``True`` when every pair of vertices is adjacent."""

        n = self._n_vertices
        if n <= 1:
            return True
        if any(degree != n - 1 for degree in self.degree_sequence()):
            return False
        # An undirected complete graph has n(n-1)/2 edges.
        return self._n_edges == n * (n - 1) // 2

    def is_cycle(self) -> bool:
        """Return ``True`` when the graph is 2-regular with as many edges as vertices.

        A disjoint union of cycles has the same signature and is accepted too.
        """

        return (
            self.min_degree() == 2
            and self.max_degree() == 2
            and self._n_edges == self._n_vertices
        )

    def is_path(self) -> bool:
        """Return ``True`` for the degree signature of a simple path.

        The check requires ``n - 1`` edges, two leaves and ``n - 2`` vertices of
        degree two; connectivity is not verified separately.
        """

        n = self._n_vertices
        if self._n_edges != n - 1:
            return False
        degrees = self.degree_sequence()
        return degrees.count(1) == 2 and degrees.count(2) == n - 2

    def is_star(self) -> bool:
        """Return ``True`` when one centre is adjacent to ``n - 1`` leaves."""

        n = self._n_vertices
        if n <= 1:
            return False
        degrees = self.degree_sequence()
        return degrees.count(n - 1) == 1 and degrees.count(1) == n - 1

    def is_regular(self) -> bool:
        return len(set(self.degree_sequence())) <= 1

    def is_petersen(self) -> bool:
        """Fingerprint test for the Petersen graph.

        Accepts any 3-regular graph on 10 vertices and 15 edges that has no
        triangle and no 4-cycle (girth at least five).  This is a necessary
        condition, not an isomorphism test.
        """

        if self._n_vertices != 10 or self._n_edges != 15:
            return False
        if self.min_degree() != 3 or self.max_degree() != 3:
            return False
        return not self._has_triangle() and not self._has_square()

    def _has_triangle(self) -> bool:
        adjacency = self._adjacency
        for u in range(self._n_vertices):
            for v in adjacency[u]:
                if adjacency[u] & adjacency[v]:
                    return True
        return False

    def _has_square(self) -> bool:
        # Walk u -> v -> w -> x and look for an edge back to u.
        adjacency = self._adjacency
        for u in range(self._n_vertices):
            for v in adjacency[u]:
                for w in adjacency[v]:
                    if w == u:
                        continue
                    for x in adjacency[w]:
                        if x != v and x != u and u in adjacency[x]:
                            return True
        return False

    #####################################
    # Connectivity                      #
    #####################################

    def is_connected(self) -> bool:
        return connectivity.is_connected(self)

    def find_path(self, s: int, t: int) -> Optional[List[int]]:
        """Return a shortest ``s``-``t`` vertex sequence or ``None``."""

        return connectivity.find_path_in_subgraph(self._adjacency, s, t)

    def has_path_between(self, s: int, t: int) -> bool:
        return self.find_path(s, t) is not None

    def find_vertex_disjoint_paths(self, s: int, t: int) -> int:
        return connectivity.find_vertex_disjoint_paths(self, s, t)

    def is_k_connected(self, k: int, exact: bool = False) -> bool:
        return connectivity.is_k_connected(self, k, exact)

    def is_k_connected_approx(self, k: int) -> bool:
        return connectivity.is_k_connected_approx(self, k)

    def is_k_connected_exact(self, k: int) -> bool:
        return connectivity.is_k_connected_exact(self, k)

    def vertex_connectivity_estimate(self, exact: bool = False, max_k: Optional[int] = None) -> int:
        return connectivity.vertex_connectivity_estimate(self, exact, max_k)

    #####################################
    # Theorems                          #
    #####################################

    def independent_set_approx(self) -> List[int]:
        return theorems.independent_set_approx(self)

    def independence_number_approx(self) -> int:
        return theorems.independence_number_approx(self)

    def is_likely_hamiltonian(self, exact: bool = False) -> bool:
        return theorems.is_likely_hamiltonian(self, exact)

    def is_likely_traceable(self, exact: bool = False) -> bool:
        return theorems.is_likely_traceable(self, exact)

    def zagreb_upper_bound(self) -> float:
        return theorems.zagreb_upper_bound(self)
