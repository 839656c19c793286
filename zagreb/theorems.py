"""Zagreb-index based Hamiltonicity, traceability and upper-bound formulas.

The Hamiltonicity and traceability tests combine known special cases
(complete graphs, cycles, paths, stars, the Petersen graph) with Dirac-type
degree conditions and a sufficient condition on the first Zagreb index.  A
``False`` answer therefore means "not established", not "proven impossible".
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List

from .connectivity import is_k_connected

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


#####################################
# Independence number               #
#####################################


def independent_set_approx(graph: "Graph") -> List[int]:
    """Return a maximal independent set built by greedy minimum-degree removal.

    The vertex with the fewest neighbours among the remaining vertices is taken
    (lowest id on ties), then it and its neighbours are discarded.
    """

    remaining = set(range(graph.vertex_count()))
    chosen: List[int] = []
    while remaining:
        vertex = min(
            sorted(remaining),
            key=lambda v: len(graph.neighbors(v) & remaining),
        )
        chosen.append(vertex)
        remaining.discard(vertex)
        remaining -= graph.neighbors(vertex)
    return sorted(chosen)


def independence_number_approx(graph: "Graph") -> int:
    """Return the size of :func:`independent_set_approx` (a lower bound on alpha)."""

    return len(independent_set_approx(graph))


#####################################
# Zagreb thresholds                 #
#####################################


def _zagreb_threshold(graph: "Graph", order_offset: int, divisor: int) -> int:
    # (n - c) * Delta^2 + e^2 // divisor + floor((sqrt(n - c) - sqrt(delta))^2 * e)
    n = graph.vertex_count()
    e = graph.edge_count()
    delta = graph.min_degree()
    delta_max = graph.max_degree()
    reduced_order = n - order_offset

    part1 = reduced_order * delta_max * delta_max
    part2 = (e * e) // divisor
    root_gap = math.sqrt(reduced_order) - math.sqrt(delta)
    part3 = int(root_gap * root_gap * e)
    return part1 + part2 + part3


def hamiltonian_threshold(graph: "Graph", k: int = 2) -> int:
    """Return the Zagreb threshold above which a k-connected graph is Hamiltonian."""

    return _zagreb_threshold(graph, k + 1, k + 1)


def traceable_threshold(graph: "Graph", k: int = 1) -> int:
    """Return the Zagreb threshold above which a k-connected graph is traceable."""

    return _zagreb_threshold(graph, k + 2, k + 2)


#####################################
# Hamiltonicity and traceability    #
#####################################


def is_likely_hamiltonian(graph: "Graph", exact: bool = False) -> bool:
    """Return ``True`` when ``graph`` is known or proven to be Hamiltonian.

    ``exact`` selects the k-connectivity strategy used for the 2-connectivity
    requirement.
    """

    n = graph.vertex_count()
    if n < 3:
        return False

    if graph.is_complete() or graph.is_cycle():
        return True
    if graph.is_star() and n > 3:
        return False
    # Smallest 3-connected non-Hamiltonian graph.
    if graph.is_petersen():
        return False

    k = 2
    if not is_k_connected(graph, k, exact):
        return False

    # Dirac's theorem.
    if graph.min_degree() >= n // 2:
        return True

    threshold = hamiltonian_threshold(graph, k)
    z1 = graph.first_zagreb_index()
    logger.debug("Hamiltonicity: Z1=%d, threshold=%d", z1, threshold)
    return z1 >= threshold


def is_likely_traceable(graph: "Graph", exact: bool = False) -> bool:
    """Return ``True`` when ``graph`` is known or proven to have a Hamiltonian path."""

    n = graph.vertex_count()
    if n < 2:
        return False

    if is_likely_hamiltonian(graph, exact):
        return True
    if graph.is_complete() or graph.is_path() or graph.is_star():
        return True
    if graph.is_petersen():
        return True

    k = 1
    if not is_k_connected(graph, k, exact):
        return False

    if graph.min_degree() >= (n - 1) // 2:
        return True
    # The Zagreb condition only applies from nine vertices on.
    if n < 9:
        return False

    threshold = traceable_threshold(graph, k)
    z1 = graph.first_zagreb_index()
    logger.debug("Traceability: Z1=%d, threshold=%d", z1, threshold)
    return z1 >= threshold


#####################################
# Upper bound                       #
#####################################


def zagreb_upper_bound(graph: "Graph") -> float:
    """Return ``(n - b) * Delta^2 + e^2 / b + (sqrt(n - b) - sqrt(delta))^2 * e``.

    ``b`` is the greedy independence number.  The empty graph yields ``0.0``.
    """

    beta = independence_number_approx(graph)
    if beta == 0:
        return 0.0

    n = graph.vertex_count()
    e = graph.edge_count()
    delta = graph.min_degree()
    delta_max = graph.max_degree()

    part1 = (n - beta) * delta_max * delta_max
    part2 = (e * e) / beta
    root_gap = math.sqrt(n - beta) - math.sqrt(delta)
    return float(part1) + part2 + root_gap * root_gap * e
