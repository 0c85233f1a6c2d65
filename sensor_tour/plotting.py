import matplotlib.pyplot as plt
from matplotlib.figure import Figure


def draw_tour(ax, tour, dims=(0, 1), title: str = ""):
    """
    Draw ``tour`` on ``ax`` projected on two coordinates. The start point is
    marked in green, the last point in red.
    """
    pts = tour.to_array()
    a, b = dims

    ax.scatter(pts[:, a], pts[:, b], s=15, color="black", zorder=5)
    ax.plot(pts[:, a], pts[:, b], "-", color="tab:blue", lw=1.0, label="Tour")
    ax.scatter([pts[0, a]], [pts[0, b]], s=60, color="green", zorder=6, label="start")
    ax.scatter([pts[-1, a]], [pts[-1, b]], s=60, color="red", zorder=6, label="end")

    ax.set_xlabel(f"x{a}")
    ax.set_ylabel(f"x{b}")
    ax.set_title(title or f"Nearest-neighbor tour (n = {len(tour)}, cost = {tour.cost:.3f})")
    ax.legend()
    return ax

def plot_tour(tour, dims=(0, 1), title: str = "") -> Figure:
    """Standalone figure of the tour, independent of pyplot state."""
    fig = Figure(figsize=(7, 7), dpi=100)
    draw_tour(fig.add_subplot(111), tour, dims, title)
    return fig

def show_tour(tour, dims=(0, 1), title: str = ""):
    fig, ax = plt.subplots(figsize=(7, 7))
    draw_tour(ax, tour, dims, title)
    plt.show()
