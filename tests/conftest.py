"""Fixtures for tests.

This file provides fixtures that lay out small symlink chains inside ``tmp_path``.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, NamedTuple

import pytest

if TYPE_CHECKING:
    from pathlib import Path


class Chain(NamedTuple):
    """Paths of the ``a -> b -> c`` chain built by the ``symlink_chain`` fixture."""

    a: Path
    b: Path
    c: Path


@pytest.fixture
def symlink_chain(tmp_path: Path) -> Chain:
    """Create a two-hop chain of absolute symlinks ending at a regular file.

    The structure is::

        tmp_path/
        ├── a -> tmp_path/b
        ├── b -> tmp_path/c
        └── c

    Parameters
    ----------
    tmp_path : Path
        The temporary directory path provided by the ``tmp_path`` fixture.

    Returns
    -------
    Chain
        The three paths of the chain.

    """
    a, b, c = tmp_path / "a", tmp_path / "b", tmp_path / "c"
    c.write_text("end of chain")
    os.symlink(c, b)
    os.symlink(b, a)
    return Chain(a, b, c)


@pytest.fixture
def relative_link(tmp_path: Path) -> Path:
    """Create ``tmp_path/sub/link -> ../c`` where ``tmp_path/c`` is a regular file.

    Parameters
    ----------
    tmp_path : Path
        The temporary directory path provided by the ``tmp_path`` fixture.

    Returns
    -------
    Path
        The path of the relative link.

    """
    (tmp_path / "c").write_text("target")
    sub = tmp_path / "sub"
    sub.mkdir()
    link = sub / "link"
    os.symlink(os.path.join("..", "c"), link)
    return link


@pytest.fixture
def self_loop(tmp_path: Path) -> Path:
    """Create a symlink ``tmp_path/loop`` that points at itself.

    Parameters
    ----------
    tmp_path : Path
        The temporary directory path provided by the ``tmp_path`` fixture.

    Returns
    -------
    Path
        The path of the looping link.

    """
    loop = tmp_path / "loop"
    os.symlink(loop, loop)
    return loop
