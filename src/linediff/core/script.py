"""Compaction of a minimal path into coalesced edit instructions"""

from collections.abc import Sequence

from linediff.core.models import EditInstruction, EditType, Point


def _delete(script: list[EditInstruction], x: int, y: int) -> None:
    last = script[-1] if script else None
    if last is not None and last.type == EditType.delete:
        last.orig_length += 1
    else:
        script.append(EditInstruction(EditType.delete, x, 1, y, 0))


def _insert(script: list[EditInstruction], x: int, y: int) -> None:
    last = script[-1] if script else None
    if last is not None and last.type == EditType.add:
        last.new_length += 1
    elif last is not None and last.type in (EditType.delete, EditType.change):
        # deletes are always visited before inserts at one position, so a
        # pending delete followed by an insert is a replacement
        last.type = EditType.change
        last.new_length += 1
    else:
        script.append(EditInstruction(EditType.add, x, 0, y, 1))


def build_edit_script(trace: Sequence[Point]) -> list[EditInstruction]:
    """Walk consecutive trace points and emit Delete/Add/Change/NoChange runs.

    The result covers [0, n) and [0, m) without gaps, in increasing order on
    both sides. Two empty sequences give a single zero-length NoChange.
    """
    script: list[EditInstruction] = []
    x, y = trace[0]
    for xn, yn in trace[1:]:
        k, kn = x - y, xn - yn
        if kn > k:
            _delete(script, x, y)
            x += 1
        elif kn < k:
            _insert(script, x, y)
            y += 1

        if x != xn:
            if xn - x != yn - y:
                raise ValueError(f"Trace step ({x}, {y}) -> ({xn}, {yn}) is not one edit plus a snake")
            script.append(EditInstruction(EditType.no_change, x, xn - x, y, yn - y))
        x, y = xn, yn

    if not script:
        script.append(EditInstruction(EditType.no_change, 0, 0, 0, 0))
    return script


def edit_distance(script: Sequence[EditInstruction]) -> int:
    """Number of single-element insert/delete steps implied by a script."""
    return sum(
        es.orig_length + es.new_length
        for es in script if es.type != EditType.no_change
    )


def apply_edit_script(a: Sequence, b: Sequence, script: Sequence[EditInstruction]) -> list:
    """Replay script over A, taking inserted content from B. Returns the patched list."""
    out = []
    for es in script:
        if es.type == EditType.no_change:
            out.extend(a[es.orig_start:es.orig_end])
        elif es.type in (EditType.add, EditType.change):
            out.extend(b[es.new_start:es.new_end])
    return out


def script_summary(script: Sequence[EditInstruction]) -> dict[str, int]:
    """Return added/deleted/unchanged line counts for an edit script."""
    added = deleted = unchanged = 0
    for es in script:
        if es.type == EditType.no_change:
            unchanged += es.orig_length
        else:
            deleted += es.orig_length
            added += es.new_length
    return {"added": added, "deleted": deleted, "unchanged": unchanged}
