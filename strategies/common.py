import heapq
import itertools
import numbers
from collections import deque, namedtuple

from util import InvalidIndex

INF = float('inf')

# Frontier orderings
FIFO = "FIFO"
COST = "COST"
COST_PLUS_HEURISTIC = "COST_PLUS_HEURISTIC"
ORDERINGS = (FIFO, COST, COST_PLUS_HEURISTIC)

SearchResult = namedtuple("SearchResult", ["path", "cost", "nodes_created"])


def path_cost(path, graph):
    """Total cost of a closed tour: every consecutive edge plus the edge from the last node back to the first."""
    if len(path) == 0:
        raise InvalidIndex("cannot cost an empty tour")
    n = len(graph)
    for node in path:
        if isinstance(node, bool) or not isinstance(node, numbers.Integral):
            raise InvalidIndex(f"node index must be an integer, got {node!r}")
        if not 0 <= node < n:
            raise InvalidIndex(f"node index {node!r} out of range 0..{n - 1}")
    path = [int(node) for node in path]

    total = 0
    for i in range(len(path) - 1):
        total += graph.weight(path[i], path[i + 1])
    total += graph.weight(path[-1], path[0])
    return total


def format_path(path, labels):
    """Renders node indices as city names joined by arrows."""
    if not path:
        return "No path available"
    return " -> ".join(labels[i] for i in path)


def format_cost(cost):
    """Integral costs print without a decimal point; fractional weights keep theirs."""
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)


def zero_heuristic(path, graph):
    """Placeholder estimate of the remaining tour cost; always 0."""
    return 0


def _checked_estimate(heuristic, path, graph):
    estimate = heuristic(path, graph)
    if estimate < 0:
        raise ValueError(f"heuristic returned a negative estimate {estimate!r} for {path}")
    return estimate


def exhaustive_tour_search(graph, start, ordering, heuristic=None):
    """
    Enumerates every tour that starts at `start`, visits each node once and returns to `start`.
    Args:
        graph: TourGraph
        start: start node index or city label
        ordering: FIFO, COST or COST_PLUS_HEURISTIC
        heuristic: fn(partial_path, graph) -> non-negative estimate, only used by COST_PLUS_HEURISTIC
    Returns:
        SearchResult(path, cost, nodes_created); path is [] and cost is inf if no tour was found
    """
    if ordering not in ORDERINGS:
        raise ValueError(f"Unknown frontier ordering: {ordering}")
    start = graph.index_of(start)
    n = len(graph)
    if heuristic is None or ordering != COST_PLUS_HEURISTIC:
        heuristic = zero_heuristic

    counter = itertools.count()
    if ordering == FIFO:
        frontier = deque()
        push = frontier.append
        pop = frontier.popleft
    else:
        # (cost + estimate, insertion order, path, cost) so equal keys pop first-in first-out
        frontier = []
        push = lambda item: heapq.heappush(frontier, (item[1] + item[2], next(counter)) + item)
        pop = lambda: heapq.heappop(frontier)[2:]

    push(([start], 0, _checked_estimate(heuristic, [start], graph)))
    min_cost = INF
    best_path = []
    nodes_created = 0

    while frontier:
        nodes, cost, _estimate = pop()
        nodes_created += 1

        if len(nodes) == n:
            # All cities visited: close the loop
            tour = nodes + [start]
            tour_cost = path_cost(tour, graph)
            if tour_cost < min_cost:
                min_cost = tour_cost
                best_path = tour
            continue

        last = nodes[-1]
        visited = set(nodes)
        for i in range(n):
            if i in visited:
                continue
            new_nodes = nodes + [i]
            estimate = _checked_estimate(heuristic, new_nodes, graph)
            push((new_nodes, cost + graph.weight(last, i), estimate))

    return SearchResult(best_path, min_cost, nodes_created)
