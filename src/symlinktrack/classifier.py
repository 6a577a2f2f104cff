"""Classify filesystem entries without following symbolic links."""

from __future__ import annotations

import os
import stat

from symlinktrack.schemas import FileKind

_KIND_BY_FORMAT: dict[int, FileKind] = {
    stat.S_IFREG: FileKind.REGULAR,
    stat.S_IFSOCK: FileKind.SOCKET,
    stat.S_IFCHR: FileKind.CHAR_DEVICE,
    stat.S_IFBLK: FileKind.BLOCK_DEVICE,
    stat.S_IFIFO: FileKind.FIFO,
    stat.S_IFDIR: FileKind.DIRECTORY,
    stat.S_IFLNK: FileKind.SYMLINK,
}

# Only BSD-derived platforms define a whiteout type
if getattr(stat, "S_IFWHT", 0):
    _KIND_BY_FORMAT[stat.S_IFWHT] = FileKind.WHITEOUT


def kind_from_mode(mode: int) -> FileKind:
    """Map the file-type bits of ``st_mode`` to a ``FileKind``.

    Parameters
    ----------
    mode : int
        The ``st_mode`` field of a ``stat`` result.

    Returns
    -------
    FileKind
        The matching kind, or ``FileKind.UNKNOWN`` for unrecognised types.

    """
    return _KIND_BY_FORMAT.get(stat.S_IFMT(mode), FileKind.UNKNOWN)


def classify(path: str | os.PathLike[str]) -> FileKind:
    """Return the kind of the entry at ``path`` itself, never of a symlink's target.

    Parameters
    ----------
    path : str | os.PathLike[str]
        The path to inspect.

    Returns
    -------
    FileKind
        The kind of the entry, or ``FileKind.UNKNOWN`` if it cannot be inspected.

    """
    try:
        st = os.lstat(path)
    except (OSError, ValueError):
        return FileKind.UNKNOWN
    return kind_from_mode(st.st_mode)
