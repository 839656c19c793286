"""Signed scores for the Zagreb-index inequalities.

Each function returns ``None`` when the graph is not eligible and otherwise
``bound - value``: a negative score marks a counterexample to the inequality.
"""

from .invariants import binary_properties_functions, invariants_functions
from .theorems import hamiltonian_threshold, traceable_threshold


def _eligible(G, min_size, max_size):
    order = invariants_functions["order"](G)
    return min_size <= order <= max_size


def zagreb_upper_bound_score(G, min_size, max_size):
    """``Z1(G) <= (n-b) D^2 + e^2/b + (sqrt(n-b) - sqrt(d))^2 e`` for graphs with edges."""

    if not _eligible(G, min_size, max_size):
        return None
    if invariants_functions["size"](G) == 0:
        return None
    bound = invariants_functions["zagreb_upper_bound"](G)
    return bound - invariants_functions["first_zagreb_index"](G)


def zagreb_lower_bound_score(G, min_size, max_size):
    """``Z1(G) >= 4 e^2 / n`` (Cauchy-Schwarz on the degree sequence)."""

    if not _eligible(G, min_size, max_size):
        return None
    order = invariants_functions["order"](G)
    if order == 0:
        return None
    size = invariants_functions["size"](G)
    return invariants_functions["first_zagreb_index"](G) - 4 * size * size / order


def hamiltonian_margin(G, min_size, max_size):
    """``Z1(G) - threshold`` for 2-connected graphs with at least three vertices.

    Non-negative values mean the Zagreb condition certifies Hamiltonicity.
    """

    if not _eligible(G, min_size, max_size) or invariants_functions["order"](G) < 3:
        return None
    if not G.is_k_connected(2):
        return None
    return invariants_functions["first_zagreb_index"](G) - hamiltonian_threshold(G)


def traceable_margin(G, min_size, max_size):
    """``Z1(G) - threshold`` for connected graphs with at least nine vertices."""

    if not _eligible(G, min_size, max_size) or invariants_functions["order"](G) < 9:
        return None
    if not binary_properties_functions["connected"](G):
        return None
    return invariants_functions["first_zagreb_index"](G) - traceable_threshold(G)


def dirac_margin(G, min_size, max_size):
    """``delta(G) - n/2``; non-negative values satisfy Dirac's condition."""

    if not _eligible(G, min_size, max_size) or invariants_functions["order"](G) < 3:
        return None
    order = invariants_functions["order"](G)
    return invariants_functions["minimum_degree"](G) - order // 2


# Scores checked by the batch runner, keyed by the name used in reports.
bound_scores = {
    "zagreb_upper_bound": zagreb_upper_bound_score,
    "zagreb_lower_bound": zagreb_lower_bound_score,
}

# Sufficient-condition margins reported alongside the bounds; a non-negative
# value means the condition certifies the property.
margin_scores = {
    "hamiltonian_margin": hamiltonian_margin,
    "traceable_margin": traceable_margin,
    "dirac_margin": dirac_margin,
}
