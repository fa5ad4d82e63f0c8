"""Forward furthest-reaching search over the edit graph of two sequences.

Reference: E. Myers, "An O(ND) Difference Algorithm and Its Variations" (1986).

A point (x, y) on the graph means the first x elements of A and the first y
elements of B have been consumed. Diagonal k = x - y. At edit distance d only
diagonals -d, -d+2, ..., d are reachable, and for each one the search keeps the
furthest x reached after following the snake of matching elements.
"""

import logging
from collections.abc import Callable, Sequence

from linediff.core.errors import EditDistanceExceeded


logger = logging.getLogger(__name__)

NEG_INF = float("-inf")
DEFAULT_MAX_DEPTH = 10000


def previous_diagonal(k: int, d: int, reach: Callable[[int], float]) -> int:
    """Return the diagonal (k+1 or k-1) from which diagonal k is entered at level d.

    reach(j) gives the furthest x on diagonal j at level d-1. Entering from k+1
    is a vertical move (insert), from k-1 a horizontal move (delete). The
    boundary diagonals only have one neighbour; otherwise the neighbour that
    ends up further along x wins, with ties going to the delete.
    """
    if k == -d or (k != d and reach(k - 1) < reach(k + 1)):
        return k + 1
    return k - 1


class SearchHistory:
    """Append-only per-level snapshots of furthest reaches, indexed by (d, k)."""

    def __init__(self) -> None:
        self._levels: list[tuple[int, ...]] = []

    def __len__(self) -> int:
        return len(self._levels)

    def append(self, reaches: Sequence[int]) -> None:
        d = len(self._levels)
        if len(reaches) != d + 1:
            raise ValueError(f"Level {d} needs {d + 1} reaches, got {len(reaches)}")
        self._levels.append(tuple(reaches))

    def reach(self, d: int, k: int) -> float:
        """Furthest x on diagonal k at level d; -inf for diagonals outside -d..d."""
        if k < -d or k > d or (k + d) % 2:
            return NEG_INF
        return self._levels[d][(k + d) // 2]

    def level(self, d: int) -> Callable[[int], float]:
        return lambda k: self.reach(d, k)


def find_shortest_path(a: Sequence, b: Sequence, max_depth: int) -> SearchHistory:
    """Search levels 0..max_depth until (len(a), len(b)) is reached.

    Returns the history of every completed level below the minimal edit
    distance D, so len(history) == D. Raises EditDistanceExceeded if D > max_depth.
    """
    n, m = len(a), len(b)
    # the edit distance never exceeds n + m, so deeper levels are never needed
    depth = min(max_depth, n + m)
    offset = depth + 1
    # diagonals -(depth+1)..(depth+1) are read while filling level depth
    buf = [0] * (2 * depth + 3)
    history = SearchHistory()

    def prev_reach(k: int) -> int:
        return buf[offset + k]

    for d in range(depth + 1):
        level = []
        for k in range(-d, d + 1, 2):
            if previous_diagonal(k, d, prev_reach) == k + 1:
                x = buf[offset + k + 1]
            else:
                x = buf[offset + k - 1] + 1
            y = x - k

            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            buf[offset + k] = x
            level.append(x)
            if x == n and y == m:
                logger.debug("Edit distance %d for %d -> %d lines", d, n, m)
                return history
        history.append(level)

    logger.debug("No path within %d edits for %d -> %d lines", max_depth, n, m)
    raise EditDistanceExceeded(max_depth)
