"""Data models shared by the search, script, hunk and render stages"""

from dataclasses import dataclass, field
from enum import Enum


Point = tuple[int, int]     # (x, y): x lines of A and y lines of B consumed


class EditType(str, Enum):
    delete = "d"
    add = "a"
    change = "c"
    no_change = "="


@dataclass
class EditInstruction:
    """One coalesced run: A[orig_start:orig_start+orig_length] -> B[new_start:new_start+new_length]."""
    type:        EditType
    orig_start:  int
    orig_length: int
    new_start:   int
    new_length:  int

    @property
    def orig_end(self) -> int:
        return self.orig_start + self.orig_length

    @property
    def new_end(self) -> int:
        return self.new_start + self.new_length


@dataclass
class Hunk:
    """Group of nearby edits plus clipped context bounds, half-open on both sides."""
    orig_start: int
    orig_end:   int
    new_start:  int
    new_end:    int
    edits:      list[EditInstruction] = field(default_factory=list)

    @property
    def orig_count(self) -> int:
        return self.orig_end - self.orig_start

    @property
    def new_count(self) -> int:
        return self.new_end - self.new_start
