import math

import matplotlib.pyplot as plt


def circle_layout(n, radius=5.0):
    """Place n cities evenly on a circle, first city at the top."""
    coords = {}
    for i in range(n):
        angle = math.pi / 2 - 2 * math.pi * i / max(n, 1)
        coords[i] = (radius * math.cos(angle), radius * math.sin(angle))
    return coords


def plot_tour(graph, path, title=None, ax=None):
    """Draw every city of the graph with its edge weights and highlight the tour.

    Args:
        graph: TourGraph
        path: closed tour as a list of node indices (may be empty)
        title: figure title, defaults to "Tour Visualization"
        ax: matplotlib Axes to draw on; a new figure is created when omitted

    Returns:
        matplotlib Figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 8))
    else:
        fig = ax.figure

    n = len(graph)
    coords = circle_layout(n)
    start = path[0] if path else None

    # Faint background edges, one label per unordered pair
    for i in range(n):
        for j in range(i + 1, n):
            x1, y1 = coords[i]
            x2, y2 = coords[j]
            ax.plot([x1, x2], [y1, y2], 'gray', linewidth=1, zorder=1, alpha=0.3)
            w1 = graph.weight(i, j)
            w2 = graph.weight(j, i)
            label = f"{w1}" if w1 == w2 else f"{w1}/{w2}"
            ax.text((x1 + x2) / 2, (y1 + y2) / 2, label, fontsize=8, color='gray',
                    ha='center', va='center', zorder=2)

    # Tour edges
    for a, b in zip(path, path[1:]):
        x1, y1 = coords[a]
        x2, y2 = coords[b]
        ax.annotate("", xy=(x2, y2), xytext=(x1, y1),
                    arrowprops=dict(arrowstyle='->', color='darkred', linewidth=2.5, shrinkA=18, shrinkB=18),
                    zorder=3)

    for node, (x, y) in coords.items():
        if node == start:
            ax.scatter(x, y, s=900, color='lightgreen', edgecolor='darkgreen', linewidth=3, zorder=4)
        else:
            ax.scatter(x, y, s=800, color='lightblue', edgecolor='darkblue', linewidth=2, zorder=4)
        ax.text(x, y, graph.labels[node], fontsize=10, ha='center', va='center',
                color="black", fontweight='bold', zorder=5)

    ax.set_title(title or "Tour Visualization", fontsize=18, fontweight='bold', pad=20)
    ax.set_aspect('equal')
    ax.axis('off')
    fig.tight_layout()
    return fig


def save_tour_plot(graph, path, filename, title=None):
    """Render the tour to an image file and release the figure."""
    fig = plot_tour(graph, path, title=title)
    fig.savefig(filename)
    plt.close(fig)
    return filename
