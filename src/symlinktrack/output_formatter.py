"""Render traversal steps as the text printed by the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from symlinktrack.schemas import Failed, Followed, Missing, Terminal

if TYPE_CHECKING:
    from symlinktrack.schemas import HopOutcome, TrackStep

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def format_step(step: TrackStep) -> tuple[str, str | None]:
    """Return the ``stdout`` text and optional ``stderr`` line for ``step``.

    Parameters
    ----------
    step : TrackStep
        The step to render.

    Returns
    -------
    tuple[str, str | None]
        The text for ``stdout`` (a ``Followed`` step has no trailing newline) and a diagnostic line for
        ``stderr``, which is only set for ``Failed`` steps.

    Raises
    ------
    TypeError
        If the step carries an unknown outcome.

    """
    outcome = step.outcome
    if isinstance(outcome, Followed):
        return f"{step.path} -> ", None
    if isinstance(outcome, Terminal):
        return f"{step.path} ({outcome.kind})\n", None
    if isinstance(outcome, Missing):
        return f"{step.path} -> {outcome.path} (nonexistent)\n", None
    if isinstance(outcome, Failed):
        return f"{step.path} (I/O error)\n", f"Error while tracking {step.path}: {outcome.error.message}"

    msg = f"Unknown hop outcome: {outcome!r}"
    raise TypeError(msg)


def exit_code_for(outcome: HopOutcome) -> int:
    """Return the process exit status for the final outcome of a traversal."""
    if isinstance(outcome, (Missing, Failed)):
        return EXIT_FAILURE
    return EXIT_SUCCESS
