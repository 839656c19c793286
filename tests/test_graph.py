import unittest

import numpy as np

from zagreb import Graph, GraphError, InvalidVertex, SelfLoop
from zagreb.utility import complete_graph, cycle_graph, path_graph, petersen_graph, prism_graph, star_graph


class ConstructionTest(unittest.TestCase):
    def test_empty_graph_defaults(self):
        graph = Graph(0)
        self.assertEqual(graph.vertex_count(), 0)
        self.assertEqual(graph.edge_count(), 0)
        self.assertEqual(graph.min_degree(), 0)
        self.assertEqual(graph.max_degree(), 0)
        self.assertEqual(graph.first_zagreb_index(), 0)
        self.assertEqual(graph.average_degree(), 0.0)
        self.assertEqual(graph.edges(), [])

    def test_new_graph_has_isolated_vertices(self):
        graph = Graph(4)
        self.assertEqual(graph.degree_sequence(), [0, 0, 0, 0])
        self.assertEqual(graph.edge_count(), 0)

    def test_rejects_invalid_vertex_count(self):
        with self.assertRaises(ValueError):
            Graph(-1)
        with self.assertRaises(TypeError):
            Graph("3")

    def test_repr(self):
        graph = Graph(3)
        graph.add_edge(0, 1)
        self.assertEqual(repr(graph), "Graph(vertices=3, edges=1)")


class AddEdgeTest(unittest.TestCase):
    def test_add_edge_is_symmetric(self):
        graph = Graph(3)
        graph.add_edge(0, 2)
        self.assertIn(2, graph.neighbors(0))
        self.assertIn(0, graph.neighbors(2))
        self.assertTrue(graph.has_edge(2, 0))
        self.assertEqual(graph.edge_count(), 1)

    def test_add_edge_is_idempotent(self):
        graph = Graph(3)
        graph.add_edge(0, 1)
        graph.add_edge(0, 1)
        graph.add_edge(1, 0)
        self.assertEqual(graph.edge_count(), 1)
        self.assertEqual(graph.degree(0), 1)
        self.assertEqual(graph.degree(1), 1)

    def test_self_loop_rejected_for_every_vertex(self):
        graph = Graph(5)
        for u in range(5):
            with self.assertRaises(SelfLoop) as ctx:
                graph.add_edge(u, u)
            self.assertEqual(ctx.exception.vertex, u)
        self.assertEqual(graph.edge_count(), 0)

    def test_out_of_range_vertex_rejected(self):
        graph = Graph(3)
        for u, v in [(3, 0), (0, 3), (5, 7), (-1, 0)]:
            with self.assertRaises(InvalidVertex):
                graph.add_edge(u, v)
        self.assertEqual(graph.edge_count(), 0)
        self.assertEqual(graph.degree_sequence(), [0, 0, 0])

    def test_integer_like_vertex_ids_accepted(self):
        graph = Graph(4)
        graph.add_edge(np.int64(0), np.int32(3))
        self.assertTrue(graph.has_edge(0, 3))
        self.assertEqual(graph.edges(), [(0, 3)])
        self.assertIs(type(graph.edges()[0][1]), int)
        self.assertEqual(graph.degree(np.int64(3)), 1)
        self.assertEqual(graph.neighbors(np.uint8(0)), frozenset({3}))

    def test_non_integer_vertex_ids_rejected(self):
        graph = Graph(4)
        for u, v in [(1.0, 2), (0, "1"), (None, 1)]:
            with self.assertRaises(InvalidVertex):
                graph.add_edge(u, v)
        self.assertEqual(graph.edge_count(), 0)

    def test_errors_share_base_class(self):
        self.assertTrue(issubclass(InvalidVertex, GraphError))
        self.assertTrue(issubclass(SelfLoop, GraphError))
        self.assertTrue(issubclass(GraphError, ValueError))

    def test_degree_validates_vertex(self):
        graph = Graph(2)
        with self.assertRaises(InvalidVertex) as ctx:
            graph.degree(2)
        self.assertEqual(ctx.exception.vertex, 2)
        self.assertEqual(ctx.exception.vertex_count, 2)

    def test_edge_count_is_half_the_degree_sum(self):
        graph = petersen_graph()
        self.assertEqual(sum(graph.degree_sequence()), 2 * graph.edge_count())

    def test_neighbors_is_a_snapshot(self):
        graph = Graph(3)
        graph.add_edge(0, 1)
        snapshot = graph.neighbors(0)
        graph.add_edge(0, 2)
        self.assertEqual(snapshot, frozenset({1}))
        self.assertEqual(graph.neighbors(0), frozenset({1, 2}))

    def test_adjacency_copy_is_independent(self):
        graph = cycle_graph(4)
        working = graph.adjacency_copy()
        working[0].clear()
        self.assertEqual(graph.degree(0), 2)

    def test_edges_listed_once_in_order(self):
        graph = Graph(4)
        graph.add_edge(3, 1)
        graph.add_edge(2, 0)
        graph.add_edge(1, 0)
        self.assertEqual(graph.edges(), [(0, 1), (0, 2), (1, 3)])


class MetricsTest(unittest.TestCase):
    def test_zagreb_index_of_complete_graphs(self):
        self.assertEqual(complete_graph(6).first_zagreb_index(), 150)
        self.assertEqual(complete_graph(5).first_zagreb_index(), 80)
        for n in range(1, 9):
            self.assertEqual(complete_graph(n).first_zagreb_index(), n * (n - 1) ** 2)

    def test_zagreb_index_of_paths(self):
        self.assertEqual(path_graph(5).first_zagreb_index(), 14)
        for n in range(3, 10):
            self.assertEqual(path_graph(n).first_zagreb_index(), 2 + (n - 2) * 4)

    def test_cycle_and_star_metrics(self):
        cycle = cycle_graph(5)
        self.assertEqual(cycle.first_zagreb_index(), 20)
        self.assertEqual((cycle.min_degree(), cycle.max_degree()), (2, 2))

        star = star_graph(5)
        self.assertEqual(star.first_zagreb_index(), 20)
        self.assertEqual((star.min_degree(), star.max_degree()), (1, 4))
        self.assertEqual(star.edge_count(), 4)

    def test_average_degree(self):
        self.assertAlmostEqual(petersen_graph().average_degree(), 3.0)
        self.assertAlmostEqual(path_graph(4).average_degree(), 1.5)


class ShapePredicateTest(unittest.TestCase):
    def test_complete(self):
        self.assertTrue(Graph(0).is_complete())
        self.assertTrue(Graph(1).is_complete())
        self.assertTrue(complete_graph(5).is_complete())
        self.assertFalse(cycle_graph(5).is_complete())
        self.assertFalse(Graph(2).is_complete())

    def test_cycle(self):
        self.assertTrue(cycle_graph(5).is_cycle())
        self.assertTrue(complete_graph(3).is_cycle())
        self.assertFalse(path_graph(5).is_cycle())
        self.assertFalse(Graph(0).is_cycle())

    def test_cycle_accepts_disjoint_triangles(self):
        graph = Graph(6)
        for u, v in [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]:
            graph.add_edge(u, v)
        self.assertTrue(graph.is_cycle())
        self.assertFalse(graph.is_connected())

    def test_path(self):
        self.assertTrue(path_graph(5).is_path())
        self.assertTrue(path_graph(2).is_path())
        self.assertFalse(path_graph(1).is_path())
        self.assertFalse(Graph(0).is_path())
        self.assertFalse(cycle_graph(5).is_path())
        self.assertFalse(star_graph(5).is_path())

    def test_star(self):
        self.assertTrue(star_graph(5).is_star())
        self.assertTrue(path_graph(3).is_star())
        self.assertFalse(Graph(1).is_star())
        self.assertFalse(Graph(0).is_star())
        self.assertFalse(path_graph(5).is_star())

    def test_regular(self):
        self.assertTrue(Graph(0).is_regular())
        self.assertTrue(petersen_graph().is_regular())
        self.assertFalse(star_graph(4).is_regular())

    def test_petersen_fingerprint(self):
        self.assertTrue(petersen_graph().is_petersen())

    def test_petersen_rejects_girth_four(self):
        # Pentagonal prism: 10 vertices, 15 edges, 3-regular, with 4-cycles.
        graph = prism_graph(5)
        self.assertEqual((graph.vertex_count(), graph.edge_count()), (10, 15))
        self.assertTrue(graph.is_regular())
        self.assertFalse(graph.is_petersen())

    def test_petersen_rejects_wrong_order(self):
        self.assertFalse(prism_graph(3).is_petersen())
        self.assertFalse(complete_graph(4).is_petersen())


class FindPathTest(unittest.TestCase):
    def test_path_across_line(self):
        path = path_graph(5).find_path(0, 4)
        self.assertEqual(path, [0, 1, 2, 3, 4])

    def test_no_path_in_disconnected_graph(self):
        graph = Graph(5)
        graph.add_edge(0, 1)
        graph.add_edge(1, 2)
        self.assertIsNone(graph.find_path(0, 4))
        self.assertFalse(graph.has_path_between(0, 4))
        self.assertTrue(graph.has_path_between(0, 2))

    def test_shortest_path_is_returned(self):
        path = cycle_graph(6).find_path(0, 2)
        self.assertEqual(path, [0, 1, 2])

    def test_trivial_and_unknown_endpoints(self):
        graph = path_graph(3)
        self.assertEqual(graph.find_path(1, 1), [1])
        self.assertIsNone(graph.find_path(0, 9))


if __name__ == "__main__":
    unittest.main()
