"""Locate the numeric token embedded in a filename."""

import re
from dataclasses import dataclass
from typing import Final

# Largest value a filename number may take (signed 32-bit)
MAX_NUMBER: Final = 2**31 - 1

# Lazy prefix, first run of ASCII digits, everything else as suffix.
# [0-9] rather than \d so that non-ASCII digits are not treated as numbers.
FILENAME_PATTERN: Final = re.compile(r"(.*?)([0-9]+)(.*)", re.DOTALL)


class NumberOverflowError(ValueError):
    """Raised when a filename's digit run does not fit in a signed 32-bit integer."""

    def __init__(self, filename: str, digits: str):
        self.filename = filename
        self.digits = digits
        super().__init__(f"Number {digits} in {filename!r} is too large")


@dataclass(frozen=True)
class FilenameMatch:
    prefix: str
    number: int
    suffix: str


def match_filename(filename: str) -> FilenameMatch | None:
    """Split a filename around its first run of decimal digits.

    Only the first run is used; any later digits stay in the suffix untouched.
    Leading zeros are not preserved in `number`.

    Returns:
        The (prefix, number, suffix) triple, or None if the name has no digits

    Raises:
        NumberOverflowError: if the digit run is larger than MAX_NUMBER
    """
    match = FILENAME_PATTERN.fullmatch(filename)
    if not match:
        return None
    prefix, digits, suffix = match.groups()
    number = int(digits)
    if number > MAX_NUMBER:
        raise NumberOverflowError(filename, digits)
    return FilenameMatch(prefix=prefix, number=number, suffix=suffix)
