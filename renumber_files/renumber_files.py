import logging
from pathlib import Path

from .list_files import SkippedDirectory, iter_files
from .matcher import NumberOverflowError, match_filename
from .numbering import build_filename, in_range
from .report import Reporter
from .types import RenameOperation, RenameOutcome, RenumberOptions, Stats


def display_path(path: Path, *, recursive: bool) -> str:
    """Full path when walking recursively, bare filename otherwise."""
    return str(path) if recursive else path.name


def rename_file(source: Path, new_name: str, *, dry_run: bool) -> RenameOperation:
    """Rename a file within its directory, or pretend to for a dry run."""
    destination = source.with_name(new_name)
    if dry_run:
        return RenameOperation(source, destination, RenameOutcome.DRY_RUN)
    try:
        source.rename(destination)
    except OSError as e:
        logging.debug(f"Rename of {source} failed: {e}")
        return RenameOperation(source, destination, RenameOutcome.FAILED, error=e)
    return RenameOperation(source, destination, RenameOutcome.RENAMED)


def process_file(path: Path, *, options: RenumberOptions, reporter: Reporter, stats: Stats) -> None:
    """Renumber a single file if its name has a number in range."""
    filename = path.name
    try:
        match = match_filename(filename)
    except NumberOverflowError as e:
        logging.warning(str(e))
        stats.skipped += 1
        if options.show_skipped:
            reporter.skipped("file with oversized number", filename)
        return

    if match is None:
        stats.skipped += 1
        if options.show_skipped:
            reporter.skipped("non matching file", filename)
        return

    if not in_range(match.number, options.start, options.end):
        stats.skipped += 1
        if options.show_skipped:
            reporter.skipped("out of range file", filename)
        return

    new_name = build_filename(match, options.adjuster, options.number_width)
    operation = rename_file(path, new_name, dry_run=options.dry_run)
    stats.record(operation)

    source = display_path(operation.source, recursive=options.recursive)
    destination = display_path(operation.destination, recursive=options.recursive)
    if operation.error is not None:
        reporter.rename_failed(source, destination, operation.error)
    else:
        reporter.renamed(source, destination)


def renumber_files(
    directory: Path,
    *,
    options: RenumberOptions,
    reporter: Reporter | None = None,
) -> Stats:
    """Renumber the files in a directory.

    Each file whose name contains a number within the configured range is
    renamed with that number passed through `options.adjuster`. Directories
    themselves are never renamed. A failed rename is reported and the walk
    carries on; a directory that can't be listed raises OSError.

    Args:
        directory: Directory to process
        options: Renumbering options
        reporter: Where to write results (default: stdout and stderr)

    Returns:
        Counts of renamed, failed and skipped entries
    """
    reporter = reporter or Reporter()
    stats = Stats()

    for entry in iter_files(directory, recursive=options.recursive):
        if isinstance(entry, SkippedDirectory):
            stats.skipped += 1
            if options.show_skipped:
                reporter.skipped("directory", entry.path.name)
            continue
        process_file(entry, options=options, reporter=reporter, stats=stats)

    logging.debug(f"Finished {directory}: {stats}")
    return stats
