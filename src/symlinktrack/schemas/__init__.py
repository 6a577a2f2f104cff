"""Module containing the schemas for the symlink-track package."""

from symlinktrack.schemas.hop import FileKind, Failed, Followed, HopError, HopOutcome, Missing, Terminal
from symlinktrack.schemas.tracking import TrackConfig, TrackStep

__all__ = [
    "Failed",
    "FileKind",
    "Followed",
    "HopError",
    "HopOutcome",
    "Missing",
    "Terminal",
    "TrackConfig",
    "TrackStep",
]
