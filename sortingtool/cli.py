"""sortingtool CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .arguments import parse_arguments
from .commands import cmd_sort
from .constants import FLAG_VALUE_NAMES
from .exceptions import SortingToolError, UserError

# Module logger
logger = logging.getLogger("sortingtool")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


class PassThroughCommand(click.Command):
    """Command that leaves the sorting flags to parse_arguments.

    Click only sees its own options when they stand alone. A token in a
    flag-value position, a bare ``--`` and everything else is moved behind
    a ``--`` separator so it reaches the ``tokens`` argument unchanged.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        own_names = {
            name
            for param in self.get_params(ctx)
            if isinstance(param, click.Option)
            for name in param.opts
        }
        own: list[str] = []
        tokens: list[str] = []
        index = 0
        while index < len(args):
            token = args[index]
            if token.lower() in FLAG_VALUE_NAMES:
                tokens.extend(args[index : index + 2])
                index += 2
                continue
            if token in own_names:
                own.append(token)
            else:
                tokens.append(token)
            index += 1
        return super().parse_args(ctx, [*own, "--", *tokens])


# Click must not own any short option, or single-dash flags would be split
# into short option clusters.
@click.command(
    cls=PassThroughCommand,
    context_settings={"help_option_names": ["--help"]},
)
@click.version_option(version=version("sortingtool"), prog_name="sortingtool")
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(debug: bool, tokens: tuple[str, ...]):
    """Sort numbers, lines or words naturally or by number of occurrences.

    \b
    Options (case-insensitive, each takes a value):
      -sortingType natural|byCount   (default: natural)
      -dataType long|line|word       (default: word)
      -inputFile PATH                (default: stdin)
      -outputFile PATH               (default: stdout)
    """
    setup_logging(debug=debug)
    config = parse_arguments(tokens)
    cmd_sort(config)


def main():
    """Main entry point for the CLI."""
    try:
        # Not standalone, so interrupts surface here instead of as click's "Aborted!"
        rc = cli(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except SortingToolError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except (click.Abort, KeyboardInterrupt):
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
    # --help and --version return their exit code, a completed sort returns None
    sys.exit(rc or 0)
