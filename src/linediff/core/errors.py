"""Errors raised by the diff core and its file collaborators"""


class DiffError(RuntimeError):
    """Base class for failures that abort a diff invocation."""


class UnreadableInput(DiffError):
    """An input path could not be turned into a line sequence."""

    def __init__(self, path, cause: Exception = None):
        self.path = path
        self.cause = cause
        msg = f"Cannot open {path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class EditDistanceExceeded(DiffError):
    """The minimal edit distance is larger than the configured search depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Edit distance exceeds search limit of {max_depth}")
