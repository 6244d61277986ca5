from util import TourGraph

CITY_NAMES = ["Craiova", "Timisoara", "Cluj", "Oradea", "Constanta", "Bucharest"]

# Road distances (km), row = from city, column = to city
DISTANCES = [
    # Craiova, Timisoara, Cluj, Oradea, Constanta, Bucharest
    [0, 349, 442, 500, 631, 230],    # Craiova
    [349, 0, 329, 167, 755, 533],    # Timisoara
    [442, 329, 0, 152, 836, 447],    # Cluj
    [500, 167, 152, 0, 915, 614],    # Oradea
    [631, 755, 836, 915, 0, 225],    # Constanta
    [230, 533, 447, 614, 225, 0],    # Bucharest
]

DEFAULT_START = "Craiova"

# CLI key -> display name used in the "<name> Best Path:" line
METHOD_NAMES = {
    "BFS": "BFS",
    "LCS": "Least-Cost Search",
    "AS": "A* Search",
}


def default_graph():
    return TourGraph(DISTANCES, CITY_NAMES)
