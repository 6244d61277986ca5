import math
import numbers

import pandas as pd


class TourSearchError(ValueError):
    """Base class for invalid caller input."""


class InvalidGraph(TourSearchError):
    """Weight matrix is empty, not square, has missing/negative weights or a non-zero diagonal."""


class InvalidStart(TourSearchError):
    """Start city is not a node of the graph."""


class LabelMismatch(TourSearchError):
    """Number of city labels differs from the number of nodes."""


class InvalidIndex(TourSearchError):
    """A tour refers to a node index outside the graph."""


class TourGraph:
    """Represents a complete directed graph as an N x N weight matrix.

    graph.weight(i, j) is the cost of travelling directly from node i to node j.
    Labels are index-aligned with the matrix rows/columns.
    """
    def __init__(self, weights, labels=None):
        if isinstance(weights, pd.DataFrame):
            if labels is None:
                labels = [str(l) for l in weights.index]
            rows = weights.values.tolist()
        else:
            rows = [list(r) for r in weights]

        n = len(rows)
        if n == 0:
            raise InvalidGraph("graph has no nodes")
        for i, row in enumerate(rows):
            if len(row) != n:
                raise InvalidGraph(f"row {i} has {len(row)} weights, expected {n}")

        for i, row in enumerate(rows):
            for j, w in enumerate(row):
                if isinstance(w, bool) or not isinstance(w, numbers.Real):
                    raise InvalidGraph(f"weight ({i},{j}) is not a number: {w!r}")
                if math.isnan(w):
                    raise InvalidGraph(f"missing edge ({i},{j})")
                if w < 0:
                    raise InvalidGraph(f"negative weight on edge ({i},{j}): {w}")
            if row[i] != 0:
                raise InvalidGraph(f"graph[{i}][{i}] must be 0, got {row[i]}")

        if labels is None:
            labels = [str(i) for i in range(n)]
        labels = [str(l) for l in labels]
        if len(labels) != n:
            raise LabelMismatch(f"{len(labels)} labels for {n} nodes")

        # Tuples so the matrix can't be mutated after validation
        self._weights = tuple(tuple(r) for r in rows)
        self._labels = tuple(labels)

    def __len__(self):
        return len(self._weights)

    def __repr__(self):
        return f"TourGraph({len(self)} nodes: {', '.join(self._labels)})"

    @property
    def labels(self):
        return self._labels

    @property
    def weights(self):
        return self._weights

    @property
    def matrix_df(self):
        """Labelled copy of the weight matrix (index: from city, columns: to city)."""
        return pd.DataFrame(self._weights, index=list(self._labels), columns=list(self._labels))

    def weight(self, from_id, to_id):
        """Returns the cost of the edge from_id -> to_id."""
        return self._weights[from_id][to_id]

    def index_of(self, node):
        """Resolves a node index or a city label to a node index."""
        if isinstance(node, str):
            if node in self._labels:
                return self._labels.index(node)
            # Numeric strings come straight from the command line
            try:
                node = int(node)
            except ValueError:
                raise InvalidStart(f"unknown city: {node!r}")
        if isinstance(node, bool) or not isinstance(node, numbers.Integral):
            raise InvalidStart(f"start must be an index or a city name, got {node!r}")
        if not 0 <= node < len(self):
            raise InvalidStart(f"start index {node} out of range 0..{len(self) - 1}")
        return int(node)


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
