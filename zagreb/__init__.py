from . import connectivity, invariants, scores_function, theorems
from .connectivity import MAX_PATH_SEARCH_ATTEMPTS, ConnectivityStrategy, find_path_in_subgraph
from .errors import GraphError, InvalidVertex, SelfLoop
from .graph import Graph
from .utility import GraphAnalysis, NetworkReport, analyze_graph, build_network_report

__all__ = [
    "ConnectivityStrategy",
    "Graph",
    "GraphAnalysis",
    "GraphError",
    "InvalidVertex",
    "MAX_PATH_SEARCH_ATTEMPTS",
    "NetworkReport",
    "SelfLoop",
    "analyze_graph",
    "build_network_report",
    "connectivity",
    "find_path_in_subgraph",
    "invariants",
    "scores_function",
    "theorems",
]
