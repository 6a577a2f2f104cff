"""Custom exceptions for the symlink-track package."""

import errno
import os


class PathTooLongError(OSError):
    """Exception raised when a link target or joined path exceeds the platform path length bound."""

    def __init__(self, path: str) -> None:
        super().__init__(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), path)


class InvalidHopLimitError(ValueError):
    """Exception raised when a hop limit is not a positive integer."""

    def __init__(self, value: object) -> None:
        msg = f"Invalid argument to -m, must be positive integer: {value}"
        super().__init__(msg)
        self.value = value
