import os
import time
from contextlib import contextmanager

import numpy as np

DEFAULT_OUTPUT_FILE = "path.txt"
DEFAULT_DELIMITER = ","

# -------------------------
# READ / WRITE POINT FILES
# -------------------------
def read_points(path, delimiter: str = DEFAULT_DELIMITER) -> np.ndarray:
    """
    Read one point per line, coordinates separated by ``delimiter``.

    Blank lines are skipped. Every line must carry the same number of
    numeric fields as the first one.
    """
    rows = []
    dim = None
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            fields = line.split(delimiter)
            try:
                row = [float(x) for x in fields]
            except ValueError:
                raise ValueError(
                    f"{path}:{lineno}: non-numeric value in {line!r}"
                ) from None
            if dim is None:
                dim = len(row)
            elif len(row) != dim:
                raise ValueError(
                    f"{path}:{lineno}: expected {dim} coordinates, got {len(row)}"
                )
            rows.append(row)

    if not rows:
        return np.empty((0, 0))
    return np.array(rows, dtype=float)

def write_tour(tour, path=DEFAULT_OUTPUT_FILE):
    """Write the tour, one comma-joined point per line, replacing ``path``."""
    with open(path, "w", encoding="utf-8") as f:
        for line in tour.to_lines():
            f.write(line + "\n")


# -------------------------
# SAVE / LOAD RESULTS
# -------------------------
def save_tour_result(tour, folder="results", name="tour"):
    """Save a tour and its input order as a compressed .npz file."""
    os.makedirs(folder, exist_ok=True)
    filename = f"{folder}/{name}_n{len(tour)}_d{tour.pointset.dim}.npz"

    np.savez_compressed(
        filename,
        points=tour.to_array(),
        order=np.asarray(tour.indices, dtype=int),
        source_order=tour.source_order,
        cost=tour.cost,
    )
    print(f"💾 Saved: {filename}")
    return filename

def load_tour_result(filename):
    data = np.load(filename)
    return {
        "points": data["points"],
        "order": data["order"],
        "source_order": data["source_order"],
        "cost": data["cost"].item(),
    }


# -------------------------
# TIMING
# -------------------------
def duration(t1: float, t2: float, message: str) -> float:
    """Print and return the seconds elapsed between two ``perf_counter`` readings."""
    d = t2 - t1
    print(f"Duration for {message}: {d:.5f} seconds")
    return d

@contextmanager
def timed(message: str, verbose: bool = True):
    t1 = time.perf_counter()
    yield
    t2 = time.perf_counter()
    if verbose:
        duration(t1, t2, message)
