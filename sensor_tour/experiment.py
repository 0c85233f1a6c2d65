import time

from .geometry import generate_grid_points, generate_random_points
from .pointset import PointSet
from .tour import TourBuilder, brute_force_closest, closest_unvisited, random_start
from .utils import DEFAULT_OUTPUT_FILE, read_points, timed, write_tour

# -------------------------
# FILE TO FILE PIPELINE
# -------------------------
def run(input_file, output_file=DEFAULT_OUTPUT_FILE, start_index=None, seed=None, verbose=True):
    """
    Read points, build the nearest-neighbor tour and write it out, timing
    each phase. ``start_index`` addresses the input file's line order.
    """
    with timed("reading input", verbose):
        points = read_points(input_file)
        pointset = PointSet.build(points)

    with timed("sorting points", verbose):
        pointset.sort_by_first_coordinate()

    if start_index is not None:
        start_index = pointset.position_of_source(start_index)

    builder = TourBuilder(pointset, choose_start=random_start(seed))
    with timed("finding shortest path", verbose):
        tour = builder.build(start_index)

    with timed("writing to file", verbose):
        write_tour(tour, output_file)

    if verbose:
        print(f"✅ Tour over {len(tour)} points, cost {tour.cost:.4f} -> {output_file}")
    return tour


# -------------------------
# PRUNED VS BRUTE FORCE
# -------------------------
def _grid_side(n, dim):
    side = max(1, int(round(n ** (1 / dim))))
    while side ** dim > n and side > 1:
        side -= 1
    return side

def benchmark_search(sizes=(250, 500, 1000, 2000), dim=4, seed=None, family="random", verbose=True):
    """
    Build tours with the pruned and the brute-force search on the same
    instances and start points. Returns one dict per size.

    ``family`` is "random" (uniform in the unit cube) or "grid" (cell centres
    of the densest M^dim grid with at most ``n`` points). Grid instances are
    full of distance ties, so the two searches may pick different but equally
    near points and their costs can differ.
    """
    rows = []
    for i, n in enumerate(sizes):
        if family == "random":
            points = generate_random_points(n, dim, seed=None if seed is None else seed + i)
        elif family == "grid":
            points = generate_grid_points(_grid_side(n, dim), dim)
        else:
            raise ValueError(f"unknown instance family {family!r}")
        n = len(points)
        start = random_start(seed)(n)

        row = {"n": n, "dim": dim, "family": family}
        for label, search in (("pruned", closest_unvisited), ("brute", brute_force_closest)):
            builder = TourBuilder(PointSet.build(points), search=search)
            t0 = time.perf_counter()
            tour = builder.build(start)
            t1 = time.perf_counter()
            row[f"{label}_time"] = t1 - t0
            row[f"{label}_cost"] = tour.cost

        rows.append(row)
        if verbose:
            print(
                f"[n={n}] pruned {row['pruned_time']:.4f}s | brute {row['brute_time']:.4f}s "
                f"| cost {row['pruned_cost']:.4f}"
            )
    return rows
