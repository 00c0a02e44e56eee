import enum
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

# Number of -v flags that must be given before informational output appears.
# Skip diagnostics need more than this.
INFO_VERBOSITY = 1


@dataclass(frozen=True)
class RenumberOptions:
    """Options for renumbering files."""

    recursive: bool
    start: int | None  # None means no lower bound
    end: int | None  # None means no upper bound
    dry_run: bool
    number_width: int | None  # None means no padding
    verbosity: int
    adjuster: Callable[[int], int]

    @property
    def show_info(self) -> bool:
        return self.verbosity >= INFO_VERBOSITY

    @property
    def show_skipped(self) -> bool:
        return self.verbosity > INFO_VERBOSITY


class RenameOutcome(enum.Enum):
    RENAMED = "renamed"
    FAILED = "failed"
    DRY_RUN = "dry-run"


@dataclass
class RenameOperation:
    source: Path
    destination: Path
    outcome: RenameOutcome
    error: OSError | None = None


@dataclass
class Stats:
    """Counts for a single run."""

    renamed: int = 0
    failed: int = 0
    skipped: int = 0

    def record(self, operation: RenameOperation) -> None:
        if operation.outcome is RenameOutcome.FAILED:
            self.failed += 1
        else:
            self.renamed += 1
