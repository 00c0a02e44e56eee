import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SkippedDirectory:
    """A subdirectory that was not descended into."""

    path: Path


def iter_files(directory: Path, *, recursive: bool) -> Iterator[Path | SkippedDirectory]:
    """Iterate over the entries of a directory, depth first.

    Entries are yielded in the order the filesystem lists them. Subdirectories
    are either walked in place (recursive) or yielded as SkippedDirectory.
    Anything that isn't a directory is yielded as a file path.

    The listing of each directory is taken before any of its entries are
    yielded, so renaming a yielded file does not make it show up again.

    OSError from reading a directory is not caught.
    """
    logging.debug(f"Listing {directory}")
    entries = list(directory.iterdir())
    for entry in entries:
        if entry.is_dir():
            if recursive:
                yield from iter_files(entry, recursive=True)
            else:
                yield SkippedDirectory(entry)
            continue
        yield entry
