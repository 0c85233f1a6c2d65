import itertools

import numpy as np

# -------------------------
# 1. DISTANCES
# -------------------------
def euclidean_distance(a, b) -> float:
    """Euclidean distance between two points of the same dimension."""
    diff = np.asarray(a, float) - np.asarray(b, float)
    return float(np.sqrt(np.sum(diff * diff)))

def distances_to(points, source) -> np.ndarray:
    """Euclidean distance from every row of ``points`` to ``source``."""
    diff = np.asarray(points, float) - np.asarray(source, float)
    return np.sqrt(np.sum(diff * diff, axis=1))

def compute_path_cost(points, order) -> float:
    """Length of the open path visiting ``points`` in ``order``."""
    pts = np.asarray(points, float)
    if len(order) < 2:
        return 0.0
    ordered = pts[np.asarray(order, dtype=int)]
    steps = np.diff(ordered, axis=0)
    return float(np.sum(np.sqrt(np.sum(steps * steps, axis=1))))


# -------------------------
# 2. INSTANCE GENERATION
# -------------------------
def generate_grid_points(M: int, dim: int = 2) -> np.ndarray:
    """Generate a uniform M^dim grid of points in [0,1]^dim (cell centers)."""
    step = 1 / M
    half_step = step / 2
    axis = [i * step + half_step for i in range(M)]
    return np.array(list(itertools.product(axis, repeat=dim)), dtype=float)

def generate_random_points(n: int, dim: int = 4, seed=None) -> np.ndarray:
    """Draw ``n`` points uniformly from the unit cube [0,1]^dim."""
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 1.0, size=(n, dim))
