"""Schema for the outcome of resolving a single symlink hop."""

from __future__ import annotations

import errno as errno_codes
import os
from dataclasses import dataclass

from symlinktrack.utils.compat_typing import StrEnum


class FileKind(StrEnum):
    """Coarse type of a filesystem entry, valued by its display string."""

    REGULAR = "regular file"
    SOCKET = "socket"
    CHAR_DEVICE = "character device"
    BLOCK_DEVICE = "block device"
    FIFO = "named pipe, FIFO"
    DIRECTORY = "directory"
    SYMLINK = "symbolic link"
    WHITEOUT = "whiteout"
    UNKNOWN = "unknown file"


@dataclass(frozen=True)
class HopError:
    """Structured detail of a failed filesystem operation.

    Attributes
    ----------
    errno : int
        The OS error number.
    kind : str
        Symbolic name of ``errno`` (e.g. ``"EACCES"``), or ``"EIO"`` if unknown.
    message : str
        Human-readable description of the error.

    """

    errno: int
    kind: str
    message: str

    @classmethod
    def from_os_error(cls, exc: OSError) -> HopError:
        """Build a ``HopError`` from an ``OSError``.

        Parameters
        ----------
        exc : OSError
            The exception raised by the failing call.

        Returns
        -------
        HopError
            The structured error detail.

        """
        code = exc.errno if exc.errno is not None else errno_codes.EIO
        message = exc.strerror or os.strerror(code)
        return cls(errno=code, kind=errno_codes.errorcode.get(code, "EIO"), message=message)


class HopOutcome:
    """Base class of the outcome of one hop."""


@dataclass(frozen=True)
class Followed(HopOutcome):
    """The entry was a symlink whose target exists at ``next_path``."""

    next_path: str


@dataclass(frozen=True)
class Terminal(HopOutcome):
    """The entry exists and is not a symlink."""

    kind: FileKind


@dataclass(frozen=True)
class Missing(HopOutcome):
    """The entry is a symlink whose target does not exist.

    ``path`` is the dangling target as it was resolved, relative targets joined onto the link's directory.
    """

    path: str


@dataclass(frozen=True)
class Failed(HopOutcome):
    """A filesystem operation failed for a reason other than a missing target."""

    error: HopError
