import logging
import operator
from typing import NamedTuple, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# -------------------------
# ERRORS
# -------------------------
class TourError(Exception):
    """Base class for every error raised while building a tour."""


class EmptyInputError(TourError, ValueError):
    """No points were supplied, so there is no start point to choose."""


class IndexOutOfBoundsError(TourError, IndexError):
    """An explicit index does not address a point of the set."""


class NoUnvisitedPointsError(TourError, LookupError):
    """Every point other than the source is already visited."""


# -------------------------
# POINT
# -------------------------
class Point(NamedTuple):
    """
    One point of a PointSet.

    ``index`` is the position in the sorted arena, ``source`` the position in
    the sequence the set was built from.
    """
    coords: Tuple[float, ...]
    index: int
    source: int

    def __str__(self):
        return ",".join(str(c) for c in self.coords)


# -------------------------
# POINT SET
# -------------------------
def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


class PointSet:
    """
    Arena of points sorted on their first coordinate.

    Coordinates are held in an ``(n, D)`` float array and visited flags in a
    parallel boolean array, so every view of a point shares one visited state.
    ``coords``, ``source`` and ``visited`` are exposed read-only; flags only
    change through ``mark_visited``.
    """

    def __init__(self, coords: np.ndarray):
        self.coords = _frozen(coords)
        self.source = _frozen(np.arange(len(coords)))
        self._visited = np.zeros(len(coords), dtype=bool)
        self.is_sorted = False

    @classmethod
    def build(cls, points) -> "PointSet":
        if len(points) == 0:
            raise EmptyInputError("cannot build a point set from zero points")

        coords = np.array(points, dtype=float)
        if coords.ndim != 2 or coords.shape[1] == 0:
            raise ValueError(
                f"points must all have the same number (>= 1) of coordinates, got shape {coords.shape}"
            )

        logger.debug("built point set: %d points in %d dimensions", *coords.shape)
        return cls(coords)

    @property
    def dim(self) -> int:
        return self.coords.shape[1]

    def __len__(self):
        return len(self.coords)

    def __iter__(self):
        for i in range(len(self)):
            yield self.at(i)

    def sort_by_first_coordinate(self):
        """Stable in-place sort on ``coords[0]``; ties keep their input order."""
        if self.is_sorted:
            return
        order = np.argsort(self.coords[:, 0], kind="stable")
        self.coords = _frozen(self.coords[order])
        self.source = _frozen(self.source[order])
        self._visited = self._visited[order]
        self.is_sorted = True

    # -------------------------
    # ACCESSORS
    # -------------------------
    def _check_index(self, index) -> int:
        i = operator.index(index)
        if not 0 <= i < len(self):
            raise IndexOutOfBoundsError(f"index {i} out of range for {len(self)} points")
        return i

    def at(self, index) -> Point:
        i = self._check_index(index)
        return Point(tuple(self.coords[i].tolist()), i, int(self.source[i]))

    def position_of_source(self, source_index) -> int:
        """Arena index of the point that was ``source_index``-th in the input."""
        s = operator.index(source_index)
        if not 0 <= s < len(self):
            raise IndexOutOfBoundsError(f"start index {s} out of range for {len(self)} points")
        return int(np.flatnonzero(self.source == s)[0])

    @property
    def visited(self) -> np.ndarray:
        return _frozen(self._visited.view())

    def is_visited(self, index) -> bool:
        return bool(self._visited[self._check_index(index)])

    def mark_visited(self, index):
        self._visited[self._check_index(index)] = True

    @property
    def visited_count(self) -> int:
        return int(np.count_nonzero(self._visited))

    @property
    def unvisited_count(self) -> int:
        return len(self) - self.visited_count
