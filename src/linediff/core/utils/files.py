"""Line-sequence and timestamp collaborators for file inputs"""

from datetime import datetime
from pathlib import Path

from linediff.core.errors import UnreadableInput


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only; '\\r', form feeds and other separators stay in the line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: Path) -> list[str]:
    """Return the lines of a UTF-8 text file without their '\\n' terminators."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return split_lines(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableInput(path, e) from e


def file_timestamp(path: Path) -> str:
    """Last-modified time of path in local time, as 'YYYY-MM-DD HH:MM:SS'."""
    try:
        mtime = Path(path).stat().st_mtime
    except OSError as e:
        raise UnreadableInput(path, e) from e
    return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)
