"""A command-line tool that renumbers files by shifting the number in each filename."""

__version__ = "0.1.0"

from .matcher import match_filename
from .numbering import decimal_digit_count, format_number, in_range
from .renumber_files import renumber_files

__all__ = ["decimal_digit_count", "format_number", "in_range", "match_filename", "renumber_files"]
