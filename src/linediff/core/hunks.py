"""Grouping of edit instructions into context-bounded hunks for unified output"""

import logging
from collections.abc import Iterable

from linediff.core.models import EditInstruction, EditType, Hunk


logger = logging.getLogger(__name__)

HUNK_CONTEXT = 3


def _open_hunk(es: EditInstruction, context: int) -> Hunk:
    return Hunk(
        orig_start=es.orig_start - context,
        orig_end=es.orig_end + context,
        new_start=es.new_start - context,
        new_end=es.new_end + context,
        edits=[es],
    )


def _clip(hunk: Hunk, n: int, m: int) -> Hunk:
    hunk.orig_start = max(hunk.orig_start, 0)
    hunk.orig_end = min(hunk.orig_end, n)
    hunk.new_start = max(hunk.new_start, 0)
    hunk.new_end = min(hunk.new_end, m)
    return hunk


def assemble_hunks(
    script: Iterable[EditInstruction],
    n: int,
    m: int,
    context: int = HUNK_CONTEXT,
    ) -> list[Hunk]:
    """Group edits whose context windows overlap or touch; clip bounds to [0, n) / [0, m)."""
    hunks: list[Hunk] = []
    for es in script:
        if es.type == EditType.no_change:
            continue
        # compare against the edit's own context start: testing bare orig_start
        # lets two hunks print the same context lines
        if hunks and es.orig_start - context <= hunks[-1].orig_end:
            hunk = hunks[-1]
            hunk.edits.append(es)
            hunk.orig_end = es.orig_end + context
            hunk.new_end = es.new_end + context
        else:
            hunks.append(_open_hunk(es, context))

    logger.debug("Assembled %d hunk(s)", len(hunks))
    return [_clip(h, n, m) for h in hunks]
