import argparse
import sys
import time
import tracemalloc

import pandas as pd

import constants
from util import FormatBytes, TourSearchError
from strategies.bfs import run_bfs
from strategies.least_cost import run_least_cost
from strategies.astar import run_astar
from strategies.common import INF, format_cost, format_path

try:
    import psutil  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    psutil = None

# Printed in this order when every method is requested
METHODS = {
    "BFS": run_bfs,
    "LCS": run_least_cost,
    "AS": run_astar,
}


def _execute_with_metrics(run_fn, graph, start):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage); None if psutil missing
    """
    tracemalloc.start()
    proc = psutil.Process() if psutil else None
    t0 = time.perf_counter()
    try:
        result = run_fn(graph, start)
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    rss_after = proc.memory_info().rss if proc else None
    return result, dt, peak, rss_after


def format_result(method, result, labels):
    """The two console lines for one strategy."""
    name = constants.METHOD_NAMES[method]
    if not result.path:
        return f"{name} Best Path: {format_path([], labels)}\nCost: N/A"
    return f"{name} Best Path: {format_path(result.path, labels)}\nCost: {format_cost(result.cost)}"


SUMMARY_COLUMNS = ["method", "path", "cost", "nodes_created", "runtime_ms"]


def summary_row(method, result, runtime_s, labels):
    """One row of the comparison table for a finished search."""
    return {
        "method": constants.METHOD_NAMES[method],
        "path": format_path(result.path, labels),
        "cost": result.cost if result.path else None,
        "nodes_created": result.nodes_created,
        "runtime_ms": round(runtime_s * 1000, 3),
    }


def compare_strategies(graph, start=0, methods=None):
    """Run each method once and tabulate the results.

    Returns a DataFrame with columns: method, path, cost, nodes_created, runtime_ms
    """
    rows = []
    for method in methods or METHODS:
        t0 = time.perf_counter()
        result = METHODS[method](graph, start)
        rows.append(summary_row(method, result, time.perf_counter() - t0, graph.labels))
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def build_parser():
    parser = argparse.ArgumentParser(description="Find the cheapest round trip through every city")
    parser.add_argument('--method', default="ALL", type=str.upper,
                        choices=list(METHODS) + ["ALL"], help='Search method to run (default: all, in order)')
    parser.add_argument('--start', default=constants.DEFAULT_START,
                        help='Start city, by name or index (default: %(default)s)')
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument('--metrics', '-m', dest='metrics_mode', action='store_const', const='stderr',
                         default='none', help='Print a metrics line per method to stderr')
    metrics.add_argument('--metrics-stdout', dest='metrics_mode', action='store_const', const='stdout',
                         help='Print a metrics line per method to stdout')
    parser.add_argument('--summary', action='store_true', help='Print a comparison table of the methods')
    parser.add_argument('--plot', metavar='FILE', help='Save a picture of the best tour found to FILE')
    return parser


def main(argv=None, graph=None):
    """Main function to run the search algorithms.

    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    if graph is None:
        graph = constants.default_graph()
    methods = list(METHODS) if args.method == "ALL" else [args.method]

    try:
        start = graph.index_of(args.start)
    except TourSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    best = None
    rows = []
    for method in methods:
        result, runtime_s, peak_bytes, rss_after = _execute_with_metrics(METHODS[method], graph, start)
        print(format_result(method, result, graph.labels))
        rows.append(summary_row(method, result, runtime_s, graph.labels))

        if result.path and (best is None or result.cost < best.cost):
            best = result

        # Metrics (printed separately so the result format remains intact)
        if args.metrics_mode in ("stderr", "stdout"):
            metrics_line = (
                f"Metrics: method={method} nodes_created={result.nodes_created} "
                f"path_cost={format_cost(result.cost) if result.cost != INF else 'N/A'} "
                f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)}"
                + (f" rss_now={FormatBytes(rss_after)}" if rss_after is not None else "")
            )
            if args.metrics_mode == "stdout":
                print(metrics_line)
            else:
                print(metrics_line, file=sys.stderr)

    if args.summary:
        print(pd.DataFrame(rows, columns=SUMMARY_COLUMNS).to_string(index=False))

    if args.plot:
        # matplotlib is only loaded when a plot is requested
        import seegraph
        path = best.path if best else []
        seegraph.save_tour_plot(graph, path, args.plot, title=f"Best tour from {graph.labels[start]}")
        print(f"Tour plot saved to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
