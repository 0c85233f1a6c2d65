import logging
import math
from enum import Enum
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .geometry import compute_path_cost, distances_to, euclidean_distance
from .pointset import NoUnvisitedPointsError, Point, PointSet

logger = logging.getLogger(__name__)


class Neighbor(NamedTuple):
    point: Point
    index: int
    distance: float


# -------------------------
# 1. CLOSEST UNVISITED SEARCH
# -------------------------
SCAN_BLOCK = 32


def _first_unvisited_in_scan_order(visited: np.ndarray, i0: int) -> int:
    left = np.flatnonzero(~visited[:i0])
    if len(left):
        return int(left[-1])
    right = np.flatnonzero(~visited[i0 + 1:])
    if len(right):
        return i0 + 1 + int(right[0])
    raise NoUnvisitedPointsError(f"no unvisited point left besides index {i0}")


def _fallback_neighbor(pointset: PointSet, i0: int) -> Neighbor:
    best_index = _first_unvisited_in_scan_order(pointset.visited, i0)
    distance = euclidean_distance(pointset.coords[i0], pointset.coords[best_index])
    return Neighbor(pointset.at(best_index), best_index, distance)


def closest_unvisited(pointset: PointSet, source_index: int) -> Neighbor:
    """
    Closest unvisited point to ``pointset.at(source_index)``.

    Scans leftwards from ``source_index - 1`` then rightwards from
    ``source_index + 1`` along the first-coordinate order, sharing one running
    best distance between both directions. A direction stops at the first
    candidate, visited or not, whose gap on ``coords[0]`` alone exceeds the
    best distance found up to and including it: every point further out has at
    least that gap, and Euclidean distance is never smaller than a single-axis
    gap, so the pruning is exact.

    Candidates are evaluated in numpy blocks that grow fourfold from
    ``SCAN_BLOCK``; within a block the running minimum reproduces the
    candidate-by-candidate scan, so the stopping point and the winner are the
    same as a scalar loop would give.

    Ties go to the candidate met first (left scan, then right scan).
    Candidates whose distance is NaN or infinite never become the best; they
    are only returned when nothing else is left, the first unvisited point in
    scan order winning.

    Raises
    ------
    RuntimeError
        If the set was not sorted with ``sort_by_first_coordinate``.
    NoUnvisitedPointsError
        If every other point is already visited.
    """
    if not pointset.is_sorted:
        raise RuntimeError("sort_by_first_coordinate() must run before searching")

    i0 = pointset.at(source_index).index
    coords, visited = pointset.coords, pointset.visited
    first = coords[:, 0]
    source = coords[i0]
    x0 = source[0]
    n = len(pointset)

    best_index, best_distance = -1, math.inf

    for direction in (-1, 1):
        start = i0 + direction
        size = SCAN_BLOCK
        while 0 <= start < n:
            if direction < 0:
                stop = start - size
                block = slice(start, stop if stop >= 0 else None, -1)
            else:
                block = slice(start, start + size)

            dist = distances_to(coords[block], source)
            dist[visited[block] | np.isnan(dist)] = math.inf
            running = np.minimum(np.minimum.accumulate(dist), best_distance)
            over = np.flatnonzero(np.abs(first[block] - x0) > running)
            end = int(over[0]) + 1 if len(over) else len(dist)

            k = int(np.argmin(dist[:end]))
            if dist[k] < best_distance:
                best_index, best_distance = start + direction * k, float(dist[k])

            if len(over):
                break
            start += direction * len(dist)
            size *= 4

    if best_index < 0:
        return _fallback_neighbor(pointset, i0)
    return Neighbor(pointset.at(best_index), best_index, best_distance)


def brute_force_closest(pointset: PointSet, source_index: int) -> Neighbor:
    """
    Reference O(n) search with the same contract as :func:`closest_unvisited`.

    Works on unsorted sets too. Ties go to the lowest arena index, which can
    differ from the scan-order winner of :func:`closest_unvisited` when several
    candidates share the minimum distance. When no candidate has a finite
    distance both searches return the first unvisited point in scan order.
    """
    i0 = pointset.at(source_index).index
    candidates = ~pointset.visited
    candidates[i0] = False
    idx = np.flatnonzero(candidates)
    if len(idx) == 0:
        raise NoUnvisitedPointsError(f"no unvisited point left besides index {i0}")

    dist = distances_to(pointset.coords[idx], pointset.coords[i0])
    dist[np.isnan(dist)] = math.inf
    j = int(np.argmin(dist))
    if not dist[j] < math.inf:
        return _fallback_neighbor(pointset, i0)
    best_index = int(idx[j])
    return Neighbor(pointset.at(best_index), best_index, float(dist[j]))



# -------------------------
# 2. TOUR
# -------------------------
class Tour:
    """Points of a PointSet in visitation order, held as arena indices."""

    def __init__(self, pointset: PointSet):
        self.pointset = pointset
        self._indices: List[int] = []
        self.complete = False

    def _append(self, index: int):
        if self.complete:
            raise RuntimeError("cannot extend a completed tour")
        self._indices.append(index)

    @property
    def indices(self) -> Tuple[int, ...]:
        """Arena indices in visitation order."""
        return tuple(self._indices)

    def __len__(self):
        return len(self._indices)

    def __getitem__(self, i) -> Point:
        return self.pointset.at(self._indices[i])

    def __iter__(self) -> Iterator[Point]:
        for index in self._indices:
            yield self.pointset.at(index)

    @property
    def points(self) -> List[Point]:
        return list(self)

    @property
    def source_order(self) -> np.ndarray:
        """Visitation order expressed as positions in the input sequence."""
        return self.pointset.source[self._indices]

    @property
    def cost(self) -> float:
        return compute_path_cost(self.pointset.coords, self._indices)

    def to_array(self) -> np.ndarray:
        return self.pointset.coords[self._indices]

    def to_lines(self) -> List[str]:
        return [str(p) for p in self]


# -------------------------
# 3. START POLICIES
# -------------------------
def random_start(seed=None) -> Callable[[int], int]:
    """Policy picking a start index uniformly at random."""
    rng = np.random.default_rng(seed)

    def choose_start(n: int) -> int:
        return int(rng.integers(n))

    return choose_start

def first_start(n: int) -> int:
    return 0


# -------------------------
# 4. TOUR BUILDER
# -------------------------
class BuildState(Enum):
    IDLE = "idle"
    BUILDING = "building"
    COMPLETE = "complete"


class TourBuilder:
    """
    Greedy nearest-neighbor path construction over a PointSet.

    The set is sorted on its first coordinate when the builder is created.
    ``search`` is the closest-unvisited query; it defaults to the pruned scan
    and can be swapped for :func:`brute_force_closest`.
    """

    def __init__(
        self,
        pointset: PointSet,
        choose_start: Optional[Callable[[int], int]] = None,
        search: Callable[[PointSet, int], Neighbor] = closest_unvisited,
    ):
        pointset.sort_by_first_coordinate()
        self.pointset = pointset
        self.choose_start = choose_start or random_start()
        self.search = search
        self.tour = Tour(pointset)
        self.state = BuildState.IDLE

    def steps(self, start_index: Optional[int] = None) -> Iterator[Point]:
        """
        Build the tour lazily, yielding each point as it is appended.

        ``start_index`` is an arena index; when omitted ``choose_start`` picks
        one. Stopping iteration early leaves the builder in BUILDING.
        """
        if self.state is not BuildState.IDLE:
            raise RuntimeError(f"tour builder already {self.state.value}")

        n = len(self.pointset)
        if start_index is None:
            start_index = self.choose_start(n)
        current = self.pointset.at(start_index)

        self.state = BuildState.BUILDING
        logger.debug("building tour over %d points from index %d", n, current.index)

        self.pointset.mark_visited(current.index)
        self.tour._append(current.index)
        yield current

        while n > 1:
            try:
                neighbor = self.search(self.pointset, current.index)
            except NoUnvisitedPointsError:
                break
            self.pointset.mark_visited(neighbor.index)
            self.tour._append(neighbor.index)
            current = neighbor.point
            yield current

        self.tour.complete = True
        self.state = BuildState.COMPLETE
        logger.debug("tour complete: %d points", len(self.tour))

    def build(self, start_index: Optional[int] = None) -> Tour:
        for _ in self.steps(start_index):
            pass
        return self.tour


def build_tour(points, start_index: Optional[int] = None, choose_start=None) -> Tour:
    """
    Nearest-neighbor tour over ``points``.

    ``start_index`` addresses the input sequence; when omitted the start is
    drawn by ``choose_start`` (uniformly at random by default).
    """
    pointset = PointSet.build(points)
    pointset.sort_by_first_coordinate()
    if start_index is not None:
        start_index = pointset.position_of_source(start_index)
    return TourBuilder(pointset, choose_start).build(start_index)
