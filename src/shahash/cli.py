# src/shahash/cli.py
from __future__ import annotations
import logging
from typing import List, Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from . import __version__
from .algorithms import supported_names
from .clipboard import copy_to_clipboard
from .config import HashConfig
from .errors import ConfigError, ShahashError, UnsupportedAlgorithm
from .hashutil import digest_file
from .logging_config import setup_logging

app = typer.Typer(
    add_completion=False,
    help="shahash: print a file's digest and copy it to the clipboard",
)

# emoji=False keeps ":name:" sequences in filenames literal
console = Console(emoji=False)
logger = logging.getLogger(__name__)

USAGE = f"Usage: shahash [{'|'.join(supported_names())}] <filename>"


def _abort(msg: str, code: int = 1) -> None:
    """
    Print an error message and exit the program.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(msg)}", soft_wrap=True)
    raise typer.Exit(code=code)


def _usage(code: int = 1) -> None:
    console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=code)


class _UsageCommand(TyperCommand):
    """
    Report any command line parse error as the one-line usage with exit 1.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.info(e.format_message())
            console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
            ctx.exit(1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"shahash version {__version__}", highlight=False)
        raise typer.Exit()


@app.command(
    cls=_UsageCommand,
    # "-notes.txt" and the like are passed through as positional arguments
    context_settings={"ignore_unknown_options": True},
)
def run(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="[ALGORITHM] FILENAME",
        help=f"Optional algorithm ({', '.join(supported_names())}) followed by the file to hash",
        show_default=False,
    ),
    no_clipboard: bool = typer.Option(
        False, "--no-clipboard", help="Do not copy the hash to the clipboard"
    ),
    chunk_size: Optional[int] = typer.Option(
        None, "--chunk-size", min=1, help="Read chunk size in bytes"
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="-v for info, -vv for debug logging"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information.",
    ),
) -> None:
    """
    Hash FILENAME with ALGORITHM (default md5) and print "<name> <algorithm>: <hash>".
    """
    setup_logging(verbosity=verbose)

    try:
        cfg = HashConfig.from_env()
    except ConfigError as e:
        _abort(str(e))

    args = args or []
    if len(args) == 1:
        algorithm, filename = cfg.default_algorithm, args[0]
        if algorithm == "md5":
            logger.info("No algorithm given, using md5 (not collision resistant)")
    elif len(args) == 2:
        algorithm, filename = args
    else:
        _usage()

    logger.debug(f"Config: {cfg.to_dict()}")

    try:
        result = digest_file(filename, algorithm, chunk_size or cfg.chunk_size)
    except UnsupportedAlgorithm as e:
        logger.info(str(e))
        _usage()
    except ShahashError as e:
        _abort(str(e))

    console.print(result.line(), markup=False, highlight=False, soft_wrap=True)

    if cfg.copy_to_clipboard and not no_clipboard:
        copy_to_clipboard(result.hexdigest)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
