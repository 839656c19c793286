"""Batch analysis of standard graph families and random graphs.

Every sampled graph is analysed, checked against the Zagreb-index bounds in
:mod:`zagreb.scores_function` together with the Hamiltonicity margins, and
recorded in a labelled, timestamped directory under ``out/``
(``results.csv``, one JSON file per graph and ``summary.txt``).  Sampled
graphs can be restricted to those having given properties, e.g.
``--properties connected,regular``.
"""

from __future__ import annotations

import argparse
import csv
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from zagreb import Graph, analyze_graph
from zagreb.invariants import binary_properties_functions, check_properties
from zagreb.scores_function import bound_scores, margin_scores
from zagreb.utility import GRAPH_FAMILIES, GraphAnalysis, build_family, random_graph, save_analysis_json, to_graph6

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SweepParameters:
    """Tunable parameters controlling the batch analysis."""

    min_size: int = 4
    max_size: int = 12
    random_samples: int = 50
    edge_probability: float = 0.4
    seed: Optional[int] = 42
    exact: bool = False
    properties: str = ""
    label: str = "sweep"
    output_dir: Path = Path("out")


@dataclass(slots=True)
class GraphRecord:
    """Analysis, bound scores and sufficient-condition margins of one sampled graph."""

    label: str
    graph6: str
    analysis: GraphAnalysis
    scores: Dict[str, Optional[float]]
    margins: Dict[str, Optional[float]]
    elapsed: float

    @property
    def violations(self) -> List[str]:
        return [name for name, score in self.scores.items() if score is not None and score < 0]


CSV_HEADER = [
    "label",
    "graph6",
    *GraphAnalysis.__dataclass_fields__,
    *bound_scores,
    *margin_scores,
    "elapsed",
]


def prepare_output_directory(base: Path, label: str) -> Path:
    """Create ``base/<label>_<timestamp>`` for one run, suffixed if it already exists."""

    base.mkdir(parents=True, exist_ok=True)
    stem = f"{label}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    candidate = base / stem
    suffix = 0
    while candidate.exists():
        suffix += 1
        candidate = base / f"{stem}_{suffix:02d}"
    candidate.mkdir()
    return candidate


def sample_graphs(params: SweepParameters) -> List[Tuple[str, Graph]]:
    """Return the labelled graphs analysed by one run.

    Graphs failing ``params.properties`` are skipped.
    """

    graphs: List[Tuple[str, Graph]] = []
    for name in sorted(GRAPH_FAMILIES):
        if name == "petersen":
            graphs.append((name, build_family(name, 10)))
            continue
        for size in range(params.min_size, params.max_size + 1):
            graphs.append((f"{name}_{size}", build_family(name, size)))

    rng = np.random.default_rng(params.seed)
    for index in range(params.random_samples):
        size = int(rng.integers(params.min_size, params.max_size + 1))
        seed = int(rng.integers(0, 2 ** 32))
        graphs.append((f"random_{index}", random_graph(size, params.edge_probability, seed=seed)))

    if not params.properties:
        return graphs
    selected = [(label, graph) for label, graph in graphs if check_properties(graph, params.properties)]
    logger.info("%d of %d graphs satisfy '%s'", len(selected), len(graphs), params.properties)
    return selected


def evaluate(label: str, graph: Graph, params: SweepParameters) -> GraphRecord:
    start = time.perf_counter()
    analysis = analyze_graph(graph, exact=params.exact)
    scores = {
        name: score_fn(graph, params.min_size, params.max_size)
        for name, score_fn in bound_scores.items()
    }
    margins = {
        name: margin_fn(graph, params.min_size, params.max_size)
        for name, margin_fn in margin_scores.items()
    }
    return GraphRecord(
        label=label,
        graph6=to_graph6(graph),
        analysis=analysis,
        scores=scores,
        margins=margins,
        elapsed=time.perf_counter() - start,
    )


def _format_value(value: Optional[float]) -> str:
    return "" if value is None else f"{value:.6f}"


def append_result_csv(path: Path, record: GraphRecord) -> None:
    if not path.exists() or path.stat().st_size == 0:
        with path.open("w", newline="", encoding="utf-8") as handle:
            csv.writer(handle).writerow(CSV_HEADER)
    row = [record.label, record.graph6, *record.analysis.to_dict().values()]
    row.extend(_format_value(score) for score in record.scores.values())
    row.extend(_format_value(margin) for margin in record.margins.values())
    row.append(f"{record.elapsed:.4f}")
    with path.open("a", newline="", encoding="utf-8") as handle:
        csv.writer(handle).writerow(row)


def write_summary_txt(path: Path, records: Sequence[GraphRecord], params: SweepParameters) -> None:
    lines: list[str] = []
    lines.append("Zagreb Analysis Summary")
    lines.append("=" * 23)
    lines.append(f"Run label      : {params.label}")
    lines.append(f"Timestamp      : {datetime.now().isoformat(timespec='seconds')}")
    lines.append(f"Graph order    : [{params.min_size}, {params.max_size}]")
    lines.append(f"Random samples : {params.random_samples} (p={params.edge_probability})")
    lines.append(f"Seed           : {params.seed if params.seed is not None else 'random'}")
    lines.append(f"Connectivity   : {'exact' if params.exact else 'approximate'}")
    lines.append(f"Properties     : {params.properties or 'any'}")
    lines.append(f"Graphs         : {len(records)}")
    lines.append("")

    for name in bound_scores:
        values = np.array(
            [r.scores[name] for r in records if r.scores[name] is not None], dtype=float
        )
        if values.size == 0:
            lines.append(f"{name}: no eligible graph")
            continue
        violations = int(np.sum(values < 0))
        lines.append(
            f"{name}: eligible={values.size} violations={violations} "
            f"min={values.min():.4f} mean={values.mean():.4f}"
        )

    lines.append("")
    for name in margin_scores:
        values = np.array(
            [r.margins[name] for r in records if r.margins[name] is not None], dtype=float
        )
        if values.size == 0:
            lines.append(f"{name}: no eligible graph")
            continue
        certified = int(np.sum(values >= 0))
        lines.append(
            f"{name}: eligible={values.size} certified={certified} "
            f"max={values.max():.4f}"
        )

    hamiltonian = sum(r.analysis.is_likely_hamiltonian for r in records)
    traceable = sum(r.analysis.is_likely_traceable for r in records)
    lines.append("")
    lines.append(f"Likely Hamiltonian : {hamiltonian}/{len(records)}")
    lines.append(f"Likely traceable   : {traceable}/{len(records)}")

    flagged = [r for r in records if r.violations]
    if flagged:
        lines.append("")
        lines.append("Counterexamples:")
        for record in flagged:
            lines.append(f"  {record.label} ({record.graph6}): {', '.join(record.violations)}")

    with path.open("w", encoding="utf-8") as handle:
        handle.write("\n".join(lines).strip() + "\n")


def run(params: SweepParameters) -> List[GraphRecord]:
    output_dir = prepare_output_directory(params.output_dir, params.label)
    results_csv = output_dir / "results.csv"
    records: List[GraphRecord] = []

    for label, graph in sample_graphs(params):
        record = evaluate(label, graph, params)
        records.append(record)
        append_result_csv(results_csv, record)
        save_analysis_json(output_dir / "graphs" / f"{label}.json", record.analysis, graph6=record.graph6)
        if record.violations:
            logger.warning("%s violates %s", label, ", ".join(record.violations))

    write_summary_txt(output_dir / "summary.txt", records, params)
    print(f"Analysed {len(records)} graphs; results written to {output_dir}")
    return records


def parse_arguments(argv: Optional[Sequence[str]] = None) -> SweepParameters:
    defaults = SweepParameters()
    parser = argparse.ArgumentParser(description="Batch Zagreb-index analysis")
    parser.add_argument("--min-size", type=int, default=defaults.min_size)
    parser.add_argument("--max-size", type=int, default=defaults.max_size)
    parser.add_argument("--samples", type=int, default=defaults.random_samples)
    parser.add_argument("--p", type=float, default=defaults.edge_probability)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--exact", action="store_true")
    parser.add_argument(
        "--properties",
        default=defaults.properties,
        help=f"Comma-separated properties every graph must have ({', '.join(binary_properties_functions)})",
    )
    parser.add_argument("--label", default=defaults.label, help="Prefix of the run directory")
    parser.add_argument("--output", type=Path, default=defaults.output_dir)
    args = parser.parse_args(argv)
    if args.min_size > args.max_size:
        parser.error("--min-size must not exceed --max-size")
    unknown = [
        token.strip()
        for token in args.properties.split(",")
        if token.strip() and token.strip() not in binary_properties_functions
    ]
    if unknown:
        parser.error(f"unknown properties: {', '.join(unknown)}")
    return SweepParameters(
        min_size=args.min_size,
        max_size=args.max_size,
        random_samples=args.samples,
        edge_probability=args.p,
        seed=args.seed,
        exact=args.exact,
        properties=args.properties,
        label=args.label,
        output_dir=args.output,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run(parse_arguments(argv))


if __name__ == "__main__":
    main()
