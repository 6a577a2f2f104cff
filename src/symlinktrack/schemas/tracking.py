"""Schemas for a traversal along a symlink chain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from symlinktrack.schemas.hop import HopOutcome


class TrackConfig(BaseModel):
    """Configuration for a single traversal.

    Attributes
    ----------
    path : str
        The path to start from, absolute or relative to the working directory.
    max_hops : int | None
        Maximum number of hops to follow, or ``None`` for no ceiling (default: ``None``).

    """

    path: str
    max_hops: int | None = Field(default=None, ge=1)


@dataclass(frozen=True)
class TrackStep:
    """One ``(path, outcome)`` pair produced while walking a chain.

    ``ceiling_reached`` is set on the final step when the traversal stopped because the hop ceiling was hit
    rather than because the chain ended.
    """

    path: str
    outcome: HopOutcome
    ceiling_reached: bool = False
