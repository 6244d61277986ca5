import matplotlib
matplotlib.use("Agg")

import pytest

from constants import default_graph
from util import TourGraph


@pytest.fixture
def romania():
    return default_graph()


@pytest.fixture
def triangle():
    # Clockwise 0->1->2->0 costs 3, the reverse direction costs 30
    return TourGraph([
        [0, 1, 10],
        [10, 0, 1],
        [1, 10, 0],
    ], ["A", "B", "C"])
