"""Resolve a single hop along a chain of symbolic links."""

from __future__ import annotations

import errno
import os
import stat

from symlinktrack.classifier import kind_from_mode
from symlinktrack.config import PATH_MAX
from symlinktrack.schemas import Failed, Followed, HopError, HopOutcome, Missing, Terminal
from symlinktrack.utils.exceptions import PathTooLongError
from symlinktrack.utils.logging_config import get_logger
from symlinktrack.utils.path_utils import display_path, join_target, link_dirname

# Initialize logger for this module
logger = get_logger(__name__)

# lstat errors on a link target that mean "the target is not there"
_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def resolve_hop(current_path: str, *, path_max: int | None = None) -> HopOutcome:
    """Follow ``current_path`` by one hop if it is a symbolic link.

    Relative targets are resolved against the directory containing ``current_path``, not against the
    working directory. OS errors never escape; they are reported as ``Failed``.

    Parameters
    ----------
    current_path : str
        The path to examine.
    path_max : int | None
        Bound in bytes, terminating NUL included, on a link target or a joined path (default: ``PATH_MAX``).

    Returns
    -------
    HopOutcome
        ``Followed`` with the next path, ``Terminal`` if ``current_path`` is not a symlink, ``Missing`` if
        the link dangles, or ``Failed`` with the OS error that stopped the hop.

    """
    limit = PATH_MAX if path_max is None else path_max

    try:
        st = os.lstat(current_path)
    except (OSError, ValueError) as exc:
        return _failed(current_path, _as_os_error(exc, current_path))

    if not stat.S_ISLNK(st.st_mode):
        return Terminal(kind_from_mode(st.st_mode))

    try:
        target = os.readlink(current_path)
    except OSError as exc:
        return _failed(current_path, exc)

    if len(os.fsencode(target)) >= limit:
        return _failed(current_path, PathTooLongError(current_path))

    if os.path.isabs(target):
        candidate = target
    else:
        try:
            candidate = join_target(link_dirname(current_path), target, path_max=limit)
        except PathTooLongError as exc:
            return _failed(current_path, exc)

    try:
        os.lstat(candidate)
    except OSError as exc:
        if exc.errno in _MISSING_ERRNOS:
            logger.debug("Dangling symlink", extra={"path": current_path, "target": target, "missing": candidate})
            return Missing(candidate)
        return _failed(current_path, exc)

    next_path = candidate if os.path.isabs(target) else display_path(candidate)
    logger.debug("Followed symlink", extra={"path": current_path, "target": target, "next_path": next_path})
    return Followed(next_path)


def _failed(path: str, exc: OSError) -> Failed:
    error = HopError.from_os_error(exc)
    logger.debug("Hop failed", extra={"path": path, "errno": error.kind, "message": error.message})
    return Failed(error)


def _as_os_error(exc: OSError | ValueError, path: str) -> OSError:
    # os.lstat raises ValueError for embedded NUL characters
    if isinstance(exc, OSError):
        return exc
    return OSError(errno.EINVAL, os.strerror(errno.EINVAL), path)
