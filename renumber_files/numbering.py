"""Range filtering, offsets and zero padding for filename numbers."""

from collections.abc import Callable

from .matcher import FilenameMatch


def in_range(number: int, start: int | None, end: int | None) -> bool:
    """Check a number against an inclusive range. A missing bound is unbounded."""
    if start is not None and number < start:
        return False
    if end is not None and number > end:
        return False
    return True


def offset_adjuster(offset: int) -> Callable[[int], int]:
    """Return a function that shifts a number by `offset`."""

    def adjust(number: int) -> int:
        return number + offset

    return adjust


def decimal_digit_count(number: int) -> int:
    """Count the decimal digits in the magnitude of `number`.

    Zero has one digit. Must be exact at powers of ten, so no log10.
    """
    return len(str(abs(number)))


def format_number(number: int, number_width: int | None = None) -> str:
    """Format a number, left-padding its magnitude with zeros to `number_width` digits.

    The sign is not counted towards the width: -7 at width 3 is "-007".
    """
    if number_width is None:
        return str(number)
    zeros = max(0, number_width - decimal_digit_count(number))
    digits = "0" * zeros + str(abs(number))
    return f"-{digits}" if number < 0 else digits


def build_filename(
    match: FilenameMatch,
    adjuster: Callable[[int], int],
    number_width: int | None = None,
) -> str:
    """Rebuild a filename with its number adjusted and padded."""
    adjusted = adjuster(match.number)
    return f"{match.prefix}{format_number(adjusted, number_width)}{match.suffix}"
