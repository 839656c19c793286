"""Graph construction helpers, analysis reports and result persistence."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .graph import Graph

logger = logging.getLogger(__name__)

_RANDOM_RANGE = 2 ** 32


# ---------------------------------------------------------------------------
# Conversion from and to NetworkX
# ---------------------------------------------------------------------------


def from_edge_list(n: int, edges: Iterable[Tuple[int, int]]) -> Graph:
    """Return a :class:`Graph` on ``n`` vertices holding ``edges``."""

    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def from_networkx(G: nx.Graph) -> Graph:
    """Return a :class:`Graph` isomorphic to ``G``.

    Nodes are relabelled to ``0 .. n-1`` in sorted order when they are
    sortable and in insertion order otherwise.  Self loops are dropped.
    """

    try:
        nodes = sorted(G.nodes())
    except TypeError:
        nodes = list(G.nodes())
    index = {node: position for position, node in enumerate(nodes)}
    graph = Graph(len(nodes))
    for u, v in G.edges():
        if u != v:
            graph.add_edge(index[u], index[v])
    return graph


def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(range(graph.vertex_count()))
    G.add_edges_from(graph.edges())
    return G


def from_graph6(text: str) -> Graph:
    """Decode a graph6 string (with or without the ``>>graph6<<`` header).

    Malformed input raises :class:`ValueError`.
    """

    if not text.strip():
        raise ValueError("Empty graph6 string")
    try:
        G = nx.from_graph6_bytes(text.strip().encode("ascii"))
    except (IndexError, UnicodeEncodeError, nx.NetworkXError) as exc:
        raise ValueError(f"Invalid graph6 string {text!r}: {exc}") from exc
    return from_networkx(G)


def to_graph6(graph: Graph) -> str:
    return nx.to_graph6_bytes(to_networkx(graph), header=False).decode("ascii").strip()


def load_edge_list(path: str | Path, n: Optional[int] = None) -> Graph:
    """Read whitespace-separated ``u v`` pairs from ``path``.

    Blank lines and lines starting with ``#`` are ignored.  When ``n`` is not
    given the vertex count is one more than the largest id seen.
    """

    edges: List[Tuple[int, int]] = []
    with Path(path).open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            parts = text.replace(",", " ").split()
            if len(parts) < 2:
                raise ValueError(f"{path}:{line_number}: expected two vertex ids, got {text!r}")
            try:
                edges.append((int(parts[0]), int(parts[1])))
            except ValueError as exc:
                raise ValueError(f"{path}:{line_number}: invalid vertex id in {text!r}") from exc

    if n is None:
        n = max((max(u, v) for u, v in edges), default=-1) + 1
    logger.info("Loaded %d edges on %d vertices from %s", len(edges), n, path)
    return from_edge_list(n, edges)


# ---------------------------------------------------------------------------
# Standard graph families
# ---------------------------------------------------------------------------


def complete_graph(n: int) -> Graph:
    return from_networkx(nx.complete_graph(n))


def cycle_graph(n: int) -> Graph:
    return from_networkx(nx.cycle_graph(n))


def path_graph(n: int) -> Graph:
    return from_networkx(nx.path_graph(n))


def star_graph(n: int) -> Graph:
    """Return the star on ``n`` vertices with centre 0."""

    return from_networkx(nx.star_graph(n - 1)) if n > 0 else Graph(0)


def complete_bipartite_graph(left: int, right: int) -> Graph:
    return from_networkx(nx.complete_bipartite_graph(left, right))


def prism_graph(n: int = 3) -> Graph:
    """Return the prism over a cycle of length ``n`` (two ``C_n`` joined by rungs)."""

    return from_networkx(nx.circular_ladder_graph(n))


def petersen_graph() -> Graph:
    """Return the Petersen graph: outer pentagon, spokes and inner pentagram."""

    outer = [(i, (i + 1) % 5) for i in range(5)]
    spokes = [(i, i + 5) for i in range(5)]
    inner = [(5, 7), (7, 9), (9, 6), (6, 8), (8, 5)]
    return from_edge_list(10, outer + spokes + inner)


def random_graph(n: int, p: float, *, seed: Optional[int] = None) -> Graph:
    """Return an Erdős–Rényi graph ``G(n, p)``."""

    actual_seed = seed if seed is not None else random.randrange(_RANDOM_RANGE)
    return from_networkx(nx.erdos_renyi_graph(n, p, seed=actual_seed))


def deterministic_graph(n: int, density_factor: int) -> Graph:
    """Return the graph with an edge ``ij`` whenever ``(i + j) % density_factor == 0``."""

    if density_factor < 1:
        raise ValueError(f"density_factor must be positive, got {density_factor}")
    graph = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            if (i + j) % density_factor == 0:
                graph.add_edge(i, j)
    return graph


GRAPH_FAMILIES: Dict[str, Callable[[int], Graph]] = {
    "complete": complete_graph,
    "cycle": cycle_graph,
    "path": path_graph,
    "star": star_graph,
    "bipartite": lambda n: complete_bipartite_graph(n // 2, n - n // 2),
    "prism": lambda n: prism_graph(max(3, n // 2)),
    "petersen": lambda _n: petersen_graph(),
}


def build_family(name: str, n: int) -> Graph:
    try:
        builder = GRAPH_FAMILIES[name]
    except KeyError as exc:
        raise KeyError(f"Unknown graph family '{name}'") from exc
    return builder(n)


# ---------------------------------------------------------------------------
# Analysis reports
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GraphAnalysis:
    """Summary of the invariants computed for one graph."""

    vertex_count: int
    edge_count: int
    zagreb_index: int
    min_degree: int
    max_degree: int
    is_likely_hamiltonian: bool
    is_likely_traceable: bool
    independence_number: int
    zagreb_upper_bound: float

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @property
    def bound_margin(self) -> float:
        """Return ``upper_bound - Z1``; negative values contradict the bound."""

        return self.zagreb_upper_bound - self.zagreb_index


def analyze_graph(graph: Graph, exact: bool = False) -> GraphAnalysis:
    """Compute every reported invariant of ``graph``.

    ``exact`` selects the connectivity strategy used by the Hamiltonicity and
    traceability tests.
    """

    return GraphAnalysis(
        vertex_count=graph.vertex_count(),
        edge_count=graph.edge_count(),
        zagreb_index=graph.first_zagreb_index(),
        min_degree=graph.min_degree(),
        max_degree=graph.max_degree(),
        is_likely_hamiltonian=graph.is_likely_hamiltonian(exact),
        is_likely_traceable=graph.is_likely_traceable(exact),
        independence_number=graph.independence_number_approx(),
        zagreb_upper_bound=graph.zagreb_upper_bound(),
    )


def save_analysis_json(path: str | Path, analysis: GraphAnalysis, **extra: object) -> Path:
    """Write ``analysis`` (plus optional ``extra`` keys) to ``path`` as JSON."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = analysis.to_dict()
    payload.update(extra)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
    logger.info("Analysis saved to %s", target)
    return target


def load_analysis_json(path: str | Path) -> GraphAnalysis:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    fields = GraphAnalysis.__dataclass_fields__
    return GraphAnalysis(**{name: payload[name] for name in fields})


# ---------------------------------------------------------------------------
# Network quality report
# ---------------------------------------------------------------------------

TRAVERSAL_HAMILTONIAN = "hamiltonian"
TRAVERSAL_TRACEABLE = "traceable"
TRAVERSAL_POOR = "poorly traversable"

# Average degree window considered healthy for a peer-to-peer topology.
_MIN_HEALTHY_DEGREE = 5.0
_MAX_HEALTHY_DEGREE = 15.0
# Number of low-degree vertices listed in the text report.
_LOW_DEGREE_SHOWN = 5


@dataclass(frozen=True)
class NetworkReport:
    """Topology quality summary used to reason about network resilience."""

    analysis: GraphAnalysis
    average_degree: float
    connectivity: int
    efficiency: float
    traversal: str
    low_degree_vertices: Tuple[int, ...] = field(default_factory=tuple)
    recommendations: Tuple[str, ...] = field(default_factory=tuple)


def _traversal_verdict(analysis: GraphAnalysis) -> str:
    if analysis.is_likely_hamiltonian:
        return TRAVERSAL_HAMILTONIAN
    if analysis.is_likely_traceable:
        return TRAVERSAL_TRACEABLE
    return TRAVERSAL_POOR


def recommend_improvements(graph: Graph, analysis: GraphAnalysis, exact: bool = False) -> List[str]:
    """Return human-readable suggestions for strengthening the topology.

    2-connectivity is tested directly with the selected strategy, independent
    of any cap on the reported connectivity estimate.
    """

    recommendations: List[str] = []
    if not graph.is_k_connected(2, exact):
        recommendations.append(
            "Add redundant connections to ensure the network is 2-connected"
        )
    average = graph.average_degree()
    if average < _MIN_HEALTHY_DEGREE:
        recommendations.append(
            "Increase overall connectivity (target: at least 5 connections per vertex)"
        )
    elif average > _MAX_HEALTHY_DEGREE:
        recommendations.append(
            "The network may have excessive connections, which could increase overhead"
        )
    if not analysis.is_likely_hamiltonian:
        recommendations.append("Improve connectivity to support efficient leader rotation")
    return recommendations


def build_network_report(
    graph: Graph,
    exact: bool = False,
    max_k: int = 5,
) -> NetworkReport:
    """Analyse ``graph`` and derive connectivity, efficiency and recommendations."""

    analysis = analyze_graph(graph, exact)
    connectivity = graph.vertex_connectivity_estimate(exact, max_k)
    if analysis.zagreb_upper_bound > 0:
        efficiency = 100.0 * analysis.zagreb_index / analysis.zagreb_upper_bound
    else:
        efficiency = 0.0
    degrees = graph.degree_sequence()
    low_degree = tuple(
        v for v, degree in enumerate(degrees) if degree <= analysis.min_degree + 1
    )
    return NetworkReport(
        analysis=analysis,
        average_degree=graph.average_degree(),
        connectivity=connectivity,
        efficiency=efficiency,
        traversal=_traversal_verdict(analysis),
        low_degree_vertices=low_degree,
        recommendations=tuple(recommend_improvements(graph, analysis, exact)),
    )


def format_report(report: NetworkReport) -> str:
    """Return a multi-line textual rendering of ``report``."""

    analysis = report.analysis
    lines = [
        f"Vertices: {analysis.vertex_count}",
        f"Edges: {analysis.edge_count}",
        f"Minimum degree: {analysis.min_degree}",
        f"Maximum degree: {analysis.max_degree}",
        f"Average degree: {report.average_degree:.2f}",
        f"First Zagreb index: {analysis.zagreb_index}",
        f"Zagreb upper bound: {analysis.zagreb_upper_bound:.2f}",
        f"Efficiency ratio: {report.efficiency:.2f}%",
        f"Independence number (greedy): {analysis.independence_number}",
        f"Vertex connectivity (estimate): {report.connectivity}",
        f"Likely Hamiltonian: {analysis.is_likely_hamiltonian}",
        f"Likely traceable: {analysis.is_likely_traceable}",
        f"Traversal: {report.traversal}",
    ]
    if report.low_degree_vertices:
        shown = ", ".join(str(v) for v in report.low_degree_vertices[:_LOW_DEGREE_SHOWN])
        hidden = len(report.low_degree_vertices) - _LOW_DEGREE_SHOWN
        if hidden > 0:
            shown += f" (+{hidden} more)"
        lines.append(f"Vertices that should increase connections: {shown}")
    if report.recommendations:
        lines.append("Recommendations:")
        lines.extend(f"- {item}" for item in report.recommendations)
    return "\n".join(lines)


__all__ = [
    "GRAPH_FAMILIES",
    "GraphAnalysis",
    "NetworkReport",
    "analyze_graph",
    "build_family",
    "build_network_report",
    "complete_bipartite_graph",
    "complete_graph",
    "cycle_graph",
    "deterministic_graph",
    "format_report",
    "from_edge_list",
    "from_graph6",
    "from_networkx",
    "load_analysis_json",
    "load_edge_list",
    "path_graph",
    "petersen_graph",
    "prism_graph",
    "random_graph",
    "recommend_improvements",
    "save_analysis_json",
    "star_graph",
    "to_graph6",
    "to_networkx",
]
