"""Classic and unified text rendering of edit scripts and hunks"""

from collections.abc import Iterable, Sequence
from typing import Optional

import typer
from pydantic import BaseModel

from linediff.core.models import EditInstruction, EditType, Hunk


class RenderStyle(BaseModel):
    """Per-edit-type line prefixes and colors. color=False renders plain text."""
    no_change:     str = " "
    deleted:       str = "-"
    inserted:      str = "+"
    separator:     Optional[str] = None     # line between deleted and inserted lines of a change
    color:         bool = True
    deleted_color: Optional[str] = "red"
    inserted_color: Optional[str] = "green"
    header_color:  Optional[str] = "cyan"   # unified hunk headers only

    @classmethod
    def classic(cls, color: bool = True) -> "RenderStyle":
        return cls(deleted="< ", inserted="> ", separator="---", color=color)

    @classmethod
    def unified(cls, color: bool = True) -> "RenderStyle":
        return cls(color=color)

    def paint(self, text: str, fg: Optional[str]) -> str:
        if not self.color or fg is None:
            return text
        return typer.style(text, fg=fg)


def line_range(start: int, length: int) -> str:
    """1-based inclusive range: '4' for a single line, '4,6' for several."""
    first, last = start + 1, start + length
    return str(first) if first >= last else f"{first},{last}"


def classic_header(es: EditInstruction) -> str:
    if es.type == EditType.delete:
        return f"{line_range(es.orig_start, es.orig_length)}d{es.new_start}"
    if es.type == EditType.add:
        return f"{es.orig_start}a{line_range(es.new_start, es.new_length)}"
    if es.type == EditType.change:
        return f"{line_range(es.orig_start, es.orig_length)}c{line_range(es.new_start, es.new_length)}"
    raise ValueError(f"No classic header for {es.type.name} instruction")


def _modifications(a: Sequence[str], b: Sequence[str], es: EditInstruction, style: RenderStyle) -> list[str]:
    """Deleted then inserted lines of one instruction, with prefixes and colors."""
    out = []
    if es.type in (EditType.delete, EditType.change):
        out.extend(style.paint(style.deleted + line, style.deleted_color) for line in a[es.orig_start:es.orig_end])
    if es.type == EditType.change and style.separator is not None:
        out.append(style.separator)
    if es.type in (EditType.add, EditType.change):
        out.extend(style.paint(style.inserted + line, style.inserted_color) for line in b[es.new_start:es.new_end])
    return out


def render_classic(
    a: Sequence[str],
    b: Sequence[str],
    script: Iterable[EditInstruction],
    style: RenderStyle = None,
    ) -> list[str]:
    """Render every non-NoChange instruction as a header line plus its '<'/'>' lines."""
    style = style or RenderStyle.classic()
    out = []
    for es in script:
        if es.type == EditType.no_change:
            continue
        out.append(classic_header(es))
        out.extend(_modifications(a, b, es, style))
    return out


def _hunk_side(start: int, count: int) -> str:
    # an empty side reports the line before it, e.g. '-0,0' for an empty file
    return f"{start if count == 0 else start + 1},{count}"


def hunk_header(hunk: Hunk) -> str:
    return (
        f"@@ -{_hunk_side(hunk.orig_start, hunk.orig_count)} "
        f"+{_hunk_side(hunk.new_start, hunk.new_count)} @@"
    )


def render_unified(
    a: Sequence[str],
    b: Sequence[str],
    hunks: Iterable[Hunk],
    style: RenderStyle = None,
    ) -> list[str]:
    """Render hunks with context lines interleaved in original-sequence order."""
    style = style or RenderStyle.unified()
    out = []
    for hunk in hunks:
        out.append(style.paint(hunk_header(hunk), style.header_color))
        line = hunk.orig_start
        for es in hunk.edits:
            out.extend(style.no_change + a[i] for i in range(line, es.orig_start))
            out.extend(_modifications(a, b, es, style))
            line = max(line, es.orig_end)
        out.extend(style.no_change + a[i] for i in range(line, hunk.orig_end))
    return out


def unified_header(path_a: str, stamp_a: Optional[str], path_b: str, stamp_b: Optional[str]) -> list[str]:
    """The '---' / '+++' file-pair lines that precede the first hunk."""
    def _label(path: str, stamp: Optional[str]) -> str:
        return path if stamp is None else f"{path}\t{stamp}"

    return [f"--- {_label(path_a, stamp_a)}", f"+++ {_label(path_b, stamp_b)}"]
