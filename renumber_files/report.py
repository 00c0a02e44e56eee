"""Console output for renumbering runs."""

from rich.console import Console

from .types import Stats


class Reporter:
    """Writes results to stdout and rename errors to stderr.

    Rename lines are written straight to the console's file so filenames
    come out exactly as they are on disk, tabs and control characters included.
    Only notices and the summary go through rich rendering.
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None):
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

    def dry_run_notice(self) -> None:
        self.console.print("This is a dry run. No files will be renamed.", style="yellow")

    def renamed(self, source: str, destination: str) -> None:
        self.console.file.write(f"{source} => {destination}\n")

    def rename_failed(self, source: str, destination: str, error: OSError) -> None:
        self.error_console.file.write(f"ERROR {source} => {destination}: {error}\n")

    def skipped(self, reason: str, filename: str) -> None:
        self.console.print(f"skipping {reason} {filename!r}", style="yellow", markup=False)

    def summary(self, stats: Stats, *, dry_run: bool = False) -> None:
        verb = "Would rename" if dry_run else "Renamed"
        self.console.print(
            f"\n{verb} {stats.renamed} files, {stats.failed} failed, {stats.skipped} skipped",
            markup=False,
        )
