import math

import matplotlib.pyplot as plt

from seegraph import circle_layout, plot_tour, save_tour_plot


def test_circle_layout_first_city_on_top():
    coords = circle_layout(4, radius=2.0)
    x, y = coords[0]
    assert math.isclose(x, 0.0, abs_tol=1e-9)
    assert math.isclose(y, 2.0)
    assert len(coords) == 4


def test_plot_tour_draws_every_city(romania):
    fig = plot_tour(romania, [0, 1, 3, 2, 4, 5, 0], title="Romania")
    ax = fig.axes[0]
    texts = {t.get_text() for t in ax.texts}
    assert set(romania.labels) <= texts
    assert ax.get_title() == "Romania"
    plt.close(fig)


def test_plot_tour_without_path(triangle):
    fig = plot_tour(triangle, [])
    assert fig.axes[0].get_title() == "Tour Visualization"
    plt.close(fig)


def test_save_tour_plot(triangle, tmp_path):
    target = tmp_path / "triangle.png"
    save_tour_plot(triangle, [0, 1, 2, 0], str(target))
    assert target.stat().st_size > 0
