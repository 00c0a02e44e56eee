#!/usr/bin/env python3


import logging
import re
from pathlib import Path
from typing import Final

import click

from . import __version__
from .matcher import MAX_NUMBER
from .numbering import offset_adjuster
from .renumber_files import renumber_files
from .report import Reporter
from .types import RenumberOptions

NUMERIC_PATTERN: Final = re.compile(r"^[+-]?[0-9]+$")
POSITIVE_PATTERN: Final = re.compile(r"^[1-9][0-9]*$")


class NumericParamType(click.ParamType):
    """A signed integer that fits in 32 bits, written as optional sign plus digits."""

    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        if not NUMERIC_PATTERN.match(value):
            self.fail(f"{value!r} is not numeric", param, ctx)
        number = int(value)
        if not -MAX_NUMBER - 1 <= number <= MAX_NUMBER:
            self.fail(f"{value} is out of range", param, ctx)
        return number


class WidthParamType(click.ParamType):
    """A positive integer with no sign or leading zeros."""

    name = "width"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        if not POSITIVE_PATTERN.match(value):
            self.fail(f"{value!r} is not a positive number", param, ctx)
        number = int(value)
        if number > 2**32 - 1:
            self.fail(f"{value} is out of range", param, ctx)
        return number


NUMERIC = NumericParamType()
WIDTH = WidthParamType()


# ignore_unknown_options lets a negative OFFSET such as -5 through as an argument
@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("offset", type=NUMERIC)
@click.option(
    "-d",
    "--directory",
    type=click.Path(),
    default=".",
    help="Directory to operate on (default: current working directory)",
)
@click.option("-r", "--recursive", is_flag=True, help="Descend into subdirectories")
@click.option("-S", "--start", type=NUMERIC, help="Skip files with numbers lower than this")
@click.option("-E", "--end", type=NUMERIC, help="Skip files with numbers higher than this")
@click.option(
    "-w",
    "--number-width",
    type=WIDTH,
    help="Zero-pad renumbered numbers to at least this many digits",
)
@click.option("-y", "--dry-run", is_flag=True, help="Show changes without renaming")
@click.option("-v", "--verbose", "verbosity", count=True, help="Increase verbosity (repeatable)")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Set the logging level (default: INFO)",
)
@click.version_option(__version__, prog_name="renumber-files")
def main(
    offset: int,
    directory: str,
    recursive: bool,
    start: int | None,
    end: int | None,
    number_width: int | None,
    dry_run: bool,
    verbosity: int,
    log_level: str,
) -> None:
    """Renumber files by adding OFFSET (positive or negative) to the first number in each filename."""
    # Set up logging
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    # When not in debug mode, only show our own debug messages
    if level != logging.DEBUG:
        # Set third-party loggers to WARNING
        for logger_name in logging.root.manager.loggerDict:
            if not logger_name.startswith("renumber_files"):
                logging.getLogger(logger_name).setLevel(logging.WARNING)

    root = Path(directory).resolve()
    if not root.is_dir():
        raise click.ClickException("DIRECTORY is not a directory")

    options = RenumberOptions(
        recursive=recursive,
        start=start,
        end=end,
        dry_run=dry_run,
        number_width=number_width,
        verbosity=verbosity,
        adjuster=offset_adjuster(offset),
    )
    reporter = Reporter()

    if dry_run:
        reporter.dry_run_notice()

    try:
        stats = renumber_files(root, options=options, reporter=reporter)
    except OSError as e:
        raise click.ClickException(f"Could not read directory: {e}") from e

    if options.show_info:
        reporter.summary(stats, dry_run=dry_run)


if __name__ == "__main__":
    main()
