"""Command-line interface (CLI) for symlink-track."""

# pylint: disable=no-value-for-parameter
from __future__ import annotations

import click

from symlinktrack.config import BUG_REPORT, PACKAGE_NAME, VERSION
from symlinktrack.output_formatter import EXIT_SUCCESS, exit_code_for, format_step
from symlinktrack.schemas import TrackConfig
from symlinktrack.traversal import track_config
from symlinktrack.utils.exceptions import InvalidHopLimitError
from symlinktrack.utils.logging_config import configure_logging, get_logger
from symlinktrack.utils.path_utils import validate_max_hops

# Initialize logger for this module
logger = get_logger(__name__)

_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _parse_max_hops(_ctx: click.Context, _param: click.Parameter, value: str | None) -> int | None:
    try:
        return validate_max_hops(value)
    except InvalidHopLimitError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command(
    context_settings=_CONTEXT_SETTINGS,
    epilog=f"\b\nReport any bugs to <{BUG_REPORT}>.",
)
@click.argument("file", type=str)
@click.argument("extra", nargs=-1, type=str, metavar="[FILE...]")
@click.option(
    "--max",
    "--max-hops",
    "-m",
    "max_hops",
    metavar="MAX",
    default=None,
    callback=_parse_max_hops,
    help="Do a maximum number of MAX hops",
)
@click.version_option(VERSION, "-v", "--version", prog_name=PACKAGE_NAME, message="%(prog)s %(version)s")
@click.pass_context
def main(ctx: click.Context, file: str, extra: tuple[str, ...], max_hops: int | None) -> None:
    """Create a path of resolving symbolic links.

    Follows FILE one symbolic link at a time and prints every path on the way, ending with the type of the
    last entry. Only the first FILE is processed.

    \b
    Examples
    --------
        $ symlink-track /usr/bin/python
        $ symlink-track -m 2 /etc/alternatives/editor
    """
    configure_logging()

    if extra:
        click.echo(f"Warning: Currently, {PACKAGE_NAME} supports only one file at a time.", err=True)

    config = TrackConfig(path=file, max_hops=max_hops)
    logger.debug("Tracking path", extra={"path": config.path, "max_hops": config.max_hops})

    exit_code = EXIT_SUCCESS
    for step in track_config(config):
        out, err = format_step(step)
        click.echo(out, nl=False)
        if err is not None:
            click.echo(err, err=True)
        exit_code = exit_code_for(step.outcome)

    ctx.exit(exit_code)


if __name__ == "__main__":
    main()
