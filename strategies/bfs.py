from strategies.common import FIFO, exhaustive_tour_search

def run_bfs(graph, start=0):
    """Breadth-first enumeration of every round trip from start: returns SearchResult(path, cost, nodes_created)."""
    return exhaustive_tour_search(graph, start, FIFO)
