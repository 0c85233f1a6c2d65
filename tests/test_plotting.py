from matplotlib.figure import Figure

from sensor_tour.geometry import generate_random_points
from sensor_tour.plotting import plot_tour
from sensor_tour.tour import build_tour


def test_plot_tour_draws_path_in_order():
    pts = generate_random_points(25, 4, seed=4)
    tour = build_tour(pts, start_index=0)
    fig = plot_tour(tour, dims=(2, 3))
    assert isinstance(fig, Figure)
    ax = fig.axes[0]
    path = ax.lines[0]
    assert list(path.get_xdata()) == tour.to_array()[:, 2].tolist()
    assert list(path.get_ydata()) == tour.to_array()[:, 3].tolist()
    assert ax.get_xlabel() == "x2"
    assert "n = 25" in ax.get_title()


def test_plot_tour_custom_title():
    tour = build_tour([(0.0, 0.0), (1.0, 1.0)], start_index=0)
    fig = plot_tour(tour, title="two sensors")
    assert fig.axes[0].get_title() == "two sensors"
