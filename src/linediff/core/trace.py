"""Backward reconstruction of one minimal path from the search history"""

from linediff.core.models import Point
from linediff.core.search import SearchHistory, previous_diagonal


def reconstruct_trace(history: SearchHistory, n: int, m: int) -> list[Point]:
    """Return the snake end points of a minimal path, from (0, 0) to (n, m).

    Each point after the origin is reached from its predecessor by exactly one
    edit followed by a (possibly empty) snake. The first step may be a pure
    snake when A and B share a common prefix.
    """
    x, y = n, m
    k = x - y
    trace: list[Point] = [(x, y)]
    for d in range(len(history) - 1, -1, -1):
        # the current point sits at level d+1; its predecessor is on level d
        k = previous_diagonal(k, d + 1, history.level(d))
        x = int(history.reach(d, k))
        y = x - k
        trace.append((x, y))
    if trace[-1] != (0, 0):
        trace.append((0, 0))
    trace.reverse()
    return trace
