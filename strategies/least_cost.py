from strategies.common import COST, exhaustive_tour_search

def run_least_cost(graph, start=0):
    """
    Least-cost (uniform-cost) search over partial tours.
    Args:
        graph: TourGraph
        start: start node index or city label
    Returns:
        SearchResult(path, cost, nodes_created)
    """
    # Partial tours leave the frontier cheapest first, ties in insertion order
    return exhaustive_tour_search(graph, start, COST)
