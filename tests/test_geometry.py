import numpy as np
import pytest

from sensor_tour.geometry import (
    distances_to,
    compute_path_cost,
    euclidean_distance,
    generate_grid_points,
    generate_random_points,
)


def test_euclidean_distance_known_value():
    assert euclidean_distance((0, 0, 0, 0), (3, 4, 0, 0)) == 5.0


def test_euclidean_distance_symmetric_and_zero():
    pts = generate_random_points(30, 4, seed=1)
    for a in pts[:10]:
        assert euclidean_distance(a, a) == 0.0
        for b in pts:
            assert euclidean_distance(a, b) == euclidean_distance(b, a)


def test_euclidean_distance_nan_propagates():
    d = euclidean_distance((np.nan, 0.0), (1.0, 0.0))
    assert np.isnan(d)
    assert not (d < 1.0)


def test_distances_to_matches_pairwise_distance():
    pts = generate_random_points(50, 4, seed=2)
    d = distances_to(pts, pts[7])
    assert d.shape == (50,)
    assert d[7] == 0.0
    for row, di in zip(pts, d):
        assert di == pytest.approx(euclidean_distance(row, pts[7]))
        assert abs(row[0] - pts[7][0]) <= di


def test_compute_path_cost():
    pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 0.0]])
    assert compute_path_cost(pts, [0, 1, 2]) == pytest.approx(9.0)
    assert compute_path_cost(pts, [0, 2, 1]) == pytest.approx(7.0)
    assert compute_path_cost(pts, [1]) == 0.0


def test_generate_grid_points():
    grid = generate_grid_points(4, dim=3)
    assert grid.shape == (64, 3)
    assert grid.min() == pytest.approx(0.125)
    assert grid.max() == pytest.approx(0.875)
    assert len(np.unique(grid, axis=0)) == 64


def test_generate_random_points_seeded():
    a = generate_random_points(10, 4, seed=7)
    b = generate_random_points(10, 4, seed=7)
    assert a.shape == (10, 4)
    assert np.array_equal(a, b)
    assert ((a >= 0) & (a < 1)).all()
