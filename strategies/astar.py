from strategies.common import COST_PLUS_HEURISTIC, exhaustive_tour_search, zero_heuristic

def run_astar(graph, start=0, heuristic=zero_heuristic):
    """
    A* search over partial tours, ordered by accumulated cost plus heuristic estimate.
    Args:
        graph: TourGraph
        start: start node index or city label
        heuristic: fn(partial_path, graph) -> non-negative estimate of the remaining cost.
            The default always returns 0, which makes this equivalent to run_least_cost.
            A negative estimate raises ValueError.
    Returns:
        SearchResult(path, cost, nodes_created)
    """
    return exhaustive_tour_search(graph, start, COST_PLUS_HEURISTIC, heuristic=heuristic)
