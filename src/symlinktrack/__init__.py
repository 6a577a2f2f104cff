"""symlink-track: follow a chain of symbolic links one hop at a time."""

from symlinktrack.classifier import classify
from symlinktrack.resolver import resolve_hop
from symlinktrack.traversal import track, track_config

__all__ = ["classify", "resolve_hop", "track", "track_config"]
