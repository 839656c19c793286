"""Name-based registries of graph invariants and boolean properties.

``analyze_graph.py`` prints invariants chosen by name with ``--invariant``, and
the batch runner filters sampled graphs with ``--properties``.
Every callable takes a :class:`zagreb.graph.Graph` as its only argument.
"""

from __future__ import annotations

from typing import Callable, Dict

from .graph import Graph


# Polynomial-time invariants


def order(G: Graph) -> int:
    """Return the order of ``G`` (number of vertices)."""

    return G.vertex_count()


def size(G: Graph) -> int:
    """Return the size of ``G`` (number of edges)."""

    return G.edge_count()


def density(G: Graph) -> float:
    """Return ``2e / (n (n - 1))``, or 0 for graphs with fewer than two vertices."""

    n = G.vertex_count()
    if n < 2:
        return 0.0
    return 2.0 * G.edge_count() / (n * (n - 1))


def first_zagreb_index(G: Graph) -> int:
    return G.first_zagreb_index()


def zagreb_upper_bound(G: Graph) -> float:
    return G.zagreb_upper_bound()


def zagreb_efficiency(G: Graph) -> float:
    """Return ``100 * Z1 / upper_bound`` (0 when the bound vanishes)."""

    bound = G.zagreb_upper_bound()
    if bound <= 0:
        return 0.0
    return 100.0 * G.first_zagreb_index() / bound


def independence_number(G: Graph) -> int:
    """Return the greedy independence number (a lower bound on alpha)."""

    return G.independence_number_approx()


# Mapping invariant names to implementation functions
invariants_functions: Dict[str, Callable[[Graph], float]] = {
    "order": order,
    "size": size,
    "density": density,
    "minimum_degree": Graph.min_degree,
    "maximum_degree": Graph.max_degree,
    "average_degree": Graph.average_degree,
    "first_zagreb_index": first_zagreb_index,
    "zagreb_upper_bound": zagreb_upper_bound,
    "zagreb_efficiency": zagreb_efficiency,
    "independence_number": independence_number,
    "vertex_connectivity": Graph.vertex_connectivity_estimate,
}

# Mapping names of boolean properties to predicate functions
binary_properties_functions: Dict[str, Callable[[Graph], bool]] = {
    "connected": Graph.is_connected,
    "complete": Graph.is_complete,
    "cycle": Graph.is_cycle,
    "path": Graph.is_path,
    "star": Graph.is_star,
    "regular": Graph.is_regular,
    "petersen": Graph.is_petersen,
    "likely_hamiltonian": Graph.is_likely_hamiltonian,
    "likely_traceable": Graph.is_likely_traceable,
}


def lookup_invariant(name: str) -> Callable[[Graph], float]:
    try:
        return invariants_functions[name]
    except KeyError as exc:
        raise KeyError(f"Unknown invariant '{name}'") from exc


def check_properties(G: Graph, property_text: str | None) -> bool:
    """Return ``True`` when ``G`` satisfies every comma-separated property.

    An empty string (or ``None``) means "no constraint".
    """

    if not property_text:
        return True

    for token in (item.strip() for item in property_text.split(",")):
        if not token:
            continue
        try:
            predicate = binary_properties_functions[token]
        except KeyError as exc:
            raise KeyError(f"Unknown graph property '{token}'") from exc
        if not predicate(G):
            return False
    return True
