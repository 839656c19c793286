import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import analyze_graph
import main
from main import SweepParameters


class AnalyzeGraphCliTest(unittest.TestCase):
    def test_family_report_and_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "petersen.json"
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                analyze_graph.main(["--family", "petersen", "--exact", "--json", str(target)])
            output = buffer.getvalue()
            self.assertIn("First Zagreb index: 90", output)
            self.assertIn("Traversal: traceable", output)
            payload = json.loads(target.read_text(encoding="utf-8"))
            self.assertEqual(payload["connectivity"], 3)
            self.assertEqual(payload["independence_number"], 4)
            self.assertEqual(payload["low_degree_vertices"], list(range(10)))

    def test_graph6_input(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            analyze_graph.main(["--graph6", "Bw"])
        self.assertIn("Vertices: 3", buffer.getvalue())
        self.assertIn("Edges: 3", buffer.getvalue())

    def test_invalid_graph6_input(self):
        for text in ["!!!", "A", "C~~~~~~~~~"]:
            with self.subTest(text=text):
                with self.assertRaises(SystemExit) as ctx:
                    analyze_graph.main(["--graph6", text])
                self.assertIn("Unable to build the graph", str(ctx.exception))

    def test_named_invariants(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            analyze_graph.main(
                ["--family", "cycle", "--size", "6", "--invariant", "density", "--invariant", "vertex_connectivity"]
            )
        output = buffer.getvalue().splitlines()
        self.assertIn("density: 0.4", output)
        self.assertIn("vertex_connectivity: 2", output)

    def test_unknown_invariant(self):
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            analyze_graph.main(["--family", "cycle", "--invariant", "girth"])
        self.assertIn("Unknown invariant 'girth'", str(ctx.exception))

    def test_missing_edge_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                analyze_graph.main(["--edges", str(Path(tmp) / "missing.txt")])
            self.assertIn("Unable to build the graph", str(ctx.exception))


class BatchRunnerTest(unittest.TestCase):
    def test_parse_arguments(self):
        params = main.parse_arguments(["--min-size", "5", "--max-size", "7", "--samples", "2", "--exact"])
        self.assertEqual((params.min_size, params.max_size), (5, 7))
        self.assertEqual(params.random_samples, 2)
        self.assertTrue(params.exact)
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            main.parse_arguments(["--min-size", "8", "--max-size", "4"])

    def test_unknown_property_rejected(self):
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            main.parse_arguments(["--properties", "connected,planar"])

    def test_sample_graphs_filtered_by_properties(self):
        params = SweepParameters(min_size=4, max_size=5, random_samples=0, properties="regular")
        labels = [label for label, _ in main.sample_graphs(params)]
        self.assertEqual(
            sorted(labels),
            sorted(
                ["bipartite_4", "complete_4", "complete_5", "cycle_4", "cycle_5", "petersen", "prism_4", "prism_5"]
            ),
        )

    def test_prepare_output_directory_is_labelled_and_unique(self):
        with tempfile.TemporaryDirectory() as tmp:
            first = main.prepare_output_directory(Path(tmp) / "runs", "petersen")
            second = main.prepare_output_directory(Path(tmp) / "runs", "petersen")
            self.assertNotEqual(first, second)
            self.assertTrue(first.name.startswith("petersen_"))
            self.assertTrue(second.is_dir())

    def test_sample_graphs_is_seeded(self):
        params = SweepParameters(min_size=4, max_size=6, random_samples=4, seed=3)
        first = [graph.edges() for _, graph in main.sample_graphs(params)]
        second = [graph.edges() for _, graph in main.sample_graphs(params)]
        self.assertEqual(first, second)

    def test_run_writes_outputs(self):
        with tempfile.TemporaryDirectory() as tmp:
            params = SweepParameters(min_size=4, max_size=5, random_samples=3, output_dir=Path(tmp))
            with redirect_stdout(io.StringIO()):
                records = main.run(params)

            self.assertEqual(len(records), 16)
            for record in records:
                if not record.label.startswith("random_"):
                    self.assertEqual(record.violations, [], record.label)

            (run_dir,) = list(Path(tmp).iterdir())
            self.assertTrue(run_dir.name.startswith("sweep_"))
            rows = (run_dir / "results.csv").read_text(encoding="utf-8").splitlines()
            self.assertEqual(rows[0].split(","), main.CSV_HEADER)
            self.assertEqual(len(rows), 17)
            self.assertTrue((run_dir / "graphs" / "petersen.json").exists())
            summary = (run_dir / "summary.txt").read_text(encoding="utf-8")
            self.assertIn("Graphs         : 16", summary)
            self.assertIn("dirac_margin: eligible=", summary)

            complete = next(record for record in records if record.label == "complete_5")
            self.assertEqual(complete.margins["dirac_margin"], 2)
            self.assertEqual(set(complete.margins), {"hamiltonian_margin", "traceable_margin", "dirac_margin"})


if __name__ == "__main__":
    unittest.main()
