"""Utility functions for working with link targets and the paths they resolve to."""

from __future__ import annotations

import os

from symlinktrack.utils.exceptions import InvalidHopLimitError, PathTooLongError


def link_dirname(path: str) -> str:
    """Return the directory containing ``path``.

    Follows the POSIX ``dirname`` convention: a bare filename yields ``"."`` and
    the root yields ``"/"``, so a relative target joined onto the result still
    resolves against the process working directory.

    Parameters
    ----------
    path : str
        Path of the symbolic link.

    Returns
    -------
    str
        The directory component of ``path``.

    """
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."

    head = os.path.dirname(stripped)
    if not head:
        return "."
    return head.rstrip("/") or "/"


def join_target(directory: str, target: str, *, path_max: int) -> str:
    """Join a relative link target onto the directory of its link.

    Parameters
    ----------
    directory : str
        Directory containing the link, as returned by ``link_dirname``.
    target : str
        The relative target read from the link. May be empty.
    path_max : int
        Bound on the encoded length of the joined path, terminating NUL included.

    Returns
    -------
    str
        ``directory + "/" + target``.

    Raises
    ------
    PathTooLongError
        If the encoded joined path does not fit in ``path_max`` bytes.

    """
    # Avoid "//target" when the link lives in the root directory
    prefix = directory if directory.endswith("/") else directory + "/"
    joined = prefix + target
    if len(os.fsencode(joined)) >= path_max:
        raise PathTooLongError(joined)
    return joined


def display_path(joined: str) -> str:
    """Return the lexically normalised form of ``joined`` if it names the same entry.

    ``os.path.normpath`` collapses ``..`` without consulting the filesystem, which is wrong when the
    component before ``..`` is itself a symlink to a directory. The normalised form is only used when
    it ``lstat``s to the same inode as the raw path.

    Parameters
    ----------
    joined : str
        A path produced by ``join_target`` that is known to exist.

    Returns
    -------
    str
        The normalised path, or ``joined`` unchanged.

    """
    normalised = os.path.normpath(joined)
    if normalised == joined:
        return joined

    try:
        same = os.path.samestat(os.lstat(joined), os.lstat(normalised))
    except OSError:
        return joined
    return normalised if same else joined


def validate_max_hops(value: object) -> int | None:
    """Validate a hop ceiling.

    Parameters
    ----------
    value : object
        ``None`` for an unbounded traversal, otherwise an integer or a string holding one.

    Returns
    -------
    int | None
        The hop ceiling, or ``None`` if unbounded.

    Raises
    ------
    InvalidHopLimitError
        If ``value`` is not a positive integer.

    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidHopLimitError(value)
    if isinstance(value, int):
        hops = value
    else:
        try:
            hops = int(str(value).strip(), 10)
        except ValueError as exc:
            raise InvalidHopLimitError(value) from exc
    if hops <= 0:
        raise InvalidHopLimitError(value)
    return hops
