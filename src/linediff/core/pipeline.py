"""Pipeline step functions: search, reconstruct, compact, and render orchestration"""

import logging
from collections.abc import Sequence
from pathlib import Path

from linediff.core.hunks import assemble_hunks
from linediff.core.models import EditInstruction
from linediff.core.render import RenderStyle, render_classic, render_unified, unified_header
from linediff.core.script import build_edit_script, script_summary
from linediff.core.search import DEFAULT_MAX_DEPTH, find_shortest_path
from linediff.core.trace import reconstruct_trace
from linediff.core.utils.files import file_timestamp, read_lines


logger = logging.getLogger(__name__)


def shortest_edit_script(
    a: Sequence,
    b: Sequence,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[EditInstruction]:
    """Return the minimal, coalesced edit script turning a into b.

    Raises EditDistanceExceeded when more than max_depth edits are needed.
    """
    history = find_shortest_path(a, b, max_depth)
    trace = reconstruct_trace(history, len(a), len(b))
    script = build_edit_script(trace)
    logger.debug("Edit script: %d instruction(s) over %d trace point(s)", len(script), len(trace))
    return script


def diff_lines(
    a: Sequence[str],
    b: Sequence[str],
    unified: bool = False,
    style: RenderStyle = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[str]:
    """Render the diff of two line sequences in classic or unified notation (hunks only)."""
    script = shortest_edit_script(a, b, max_depth)
    if unified:
        hunks = assemble_hunks(script, len(a), len(b))
        return render_unified(a, b, hunks, style or RenderStyle.unified())
    return render_classic(a, b, script, style or RenderStyle.classic())


def run_diff(
    path_a: Path,
    path_b: Path,
    unified: bool,
    color: bool,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[str]:
    """Read both files and return the rendered diff; empty when they are identical.

    Unified output is preceded by the file-pair header. Both inputs are read
    before any diff work so an unreadable file aborts early.
    """
    a = read_lines(path_a)
    b = read_lines(path_b)
    logger.debug("Comparing %s (%d lines) with %s (%d lines)", path_a, len(a), path_b, len(b))

    if not unified:
        return diff_lines(a, b, unified=False, style=RenderStyle.classic(color), max_depth=max_depth)

    body = diff_lines(a, b, unified=True, style=RenderStyle.unified(color), max_depth=max_depth)
    if not body:
        return []
    header = unified_header(str(path_a), file_timestamp(path_a), str(path_b), file_timestamp(path_b))
    return header + body


def run_stat(path_a: Path, path_b: Path, max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, int]:
    """Read both files and return added/deleted/unchanged line counts."""
    a = read_lines(path_a)
    b = read_lines(path_b)
    return script_summary(shortest_edit_script(a, b, max_depth))
