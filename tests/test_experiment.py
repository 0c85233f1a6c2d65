import pytest

from sensor_tour.experiment import benchmark_search, run
from sensor_tour.geometry import generate_random_points


def write_points(path, pts):
    path.write_text("".join(",".join(str(c) for c in row) + "\n" for row in pts))


def test_run_writes_tour_and_reports_phases(tmp_path, capsys):
    src = tmp_path / "sensors.txt"
    out = tmp_path / "path.txt"
    pts = generate_random_points(50, 4, seed=3)
    write_points(src, pts)

    tour = run(src, out, seed=3)
    printed = capsys.readouterr().out
    for phase in ("reading input", "sorting points", "finding shortest path", "writing to file"):
        assert f"Duration for {phase}:" in printed

    lines = out.read_text().splitlines()
    assert len(lines) == 50
    assert lines == tour.to_lines()
    assert sorted(tour.source_order.tolist()) == list(range(50))


def test_run_explicit_start_quiet(tmp_path, capsys):
    src = tmp_path / "sensors.txt"
    write_points(src, [(0, 0, 0, 0), (10, 0, 0, 0), (1, 0, 0, 0)])
    tour = run(src, tmp_path / "path.txt", start_index=1, verbose=False)
    assert capsys.readouterr().out == ""
    assert tour.source_order.tolist() == [1, 2, 0]


def test_benchmark_search_costs_agree():
    rows = benchmark_search(sizes=(20, 60), dim=3, seed=1, verbose=False)
    assert [r["n"] for r in rows] == [20, 60]
    for r in rows:
        assert r["pruned_cost"] == pytest.approx(r["brute_cost"])
        assert r["pruned_time"] >= 0.0


def test_benchmark_pruned_search_not_slower_than_brute_force():
    rows = benchmark_search(sizes=(20000,), dim=2, seed=0, verbose=False)
    row = rows[0]
    assert row["pruned_cost"] == pytest.approx(row["brute_cost"])
    assert row["pruned_time"] <= row["brute_time"]


def test_benchmark_grid_family():
    rows = benchmark_search(sizes=(70, 30), dim=3, seed=2, family="grid", verbose=False)
    assert [r["n"] for r in rows] == [64, 27]
    assert all(r["family"] == "grid" for r in rows)
    for r in rows:
        # unit-spaced steps at best, one per remaining point
        assert r["pruned_cost"] >= (r["n"] - 1) / round(r["n"] ** (1 / 3)) - 1e-9


def test_benchmark_unknown_family():
    with pytest.raises(ValueError):
        benchmark_search(sizes=(10,), family="spiral", verbose=False)
