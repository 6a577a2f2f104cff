"""Walk a chain of symbolic links one hop at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from symlinktrack.classifier import classify
from symlinktrack.config import DEFAULT_MAX_HOPS
from symlinktrack.resolver import resolve_hop
from symlinktrack.schemas import Followed, Terminal, TrackStep
from symlinktrack.utils.logging_config import get_logger
from symlinktrack.utils.path_utils import validate_max_hops

if TYPE_CHECKING:
    from symlinktrack.schemas import TrackConfig

# Initialize logger for this module
logger = get_logger(__name__)


def track(path: str, max_hops: int | None = DEFAULT_MAX_HOPS) -> Iterator[TrackStep]:
    """Yield one ``TrackStep`` per hop, starting at ``path``.

    Every step but the last carries a ``Followed`` outcome. The last step carries ``Terminal``, ``Missing``
    or ``Failed``. When ``max_hops`` hops have been followed, the last step is a ``Terminal`` classifying the
    last examined path itself, with ``ceiling_reached`` set.

    There is no cycle detection: a self-referential link is only stopped by ``max_hops``.

    Parameters
    ----------
    path : str
        The path to start from.
    max_hops : int | None
        Maximum number of hops to follow, or ``None`` for no ceiling.

    Yields
    ------
    TrackStep
        The path examined at each hop together with its outcome.

    Raises
    ------
    InvalidHopLimitError
        If ``max_hops`` is not a positive integer.

    """
    ceiling = validate_max_hops(max_hops)
    current = path
    hops = 0

    while True:
        if ceiling is not None and hops >= ceiling:
            logger.info("Hop ceiling reached", extra={"path": current, "max_hops": ceiling})
            yield TrackStep(current, Terminal(classify(current)), ceiling_reached=True)
            return

        outcome = resolve_hop(current)
        yield TrackStep(current, outcome)

        if not isinstance(outcome, Followed):
            return

        current = outcome.next_path
        hops += 1


def track_config(config: TrackConfig) -> Iterator[TrackStep]:
    """Run ``track`` with the parameters held by ``config``.

    Parameters
    ----------
    config : TrackConfig
        The traversal configuration.

    Returns
    -------
    Iterator[TrackStep]
        The steps of the traversal.

    """
    return track(config.path, max_hops=config.max_hops)
