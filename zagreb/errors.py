"""Exceptions raised by :class:`zagreb.graph.Graph` mutations and lookups."""


class GraphError(ValueError):
    """Base class for every error raised by the graph engine."""


class InvalidVertex(GraphError):
    """A vertex identifier outside ``[0, vertex_count)`` was supplied."""

    def __init__(self, vertex, vertex_count):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} is out of bounds for a graph with {vertex_count} vertices"
        )


class SelfLoop(GraphError):
    """An edge from a vertex to itself was requested."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Self-loops are not allowed (vertex {vertex!r})")
