"""Tests for filename matching and number formatting."""

import pytest

from renumber_files.matcher import MAX_NUMBER, FilenameMatch, NumberOverflowError, match_filename
from renumber_files.numbering import (
    build_filename,
    decimal_digit_count,
    format_number,
    in_range,
    offset_adjuster,
)


def test_match_filename() -> None:
    """Test prefix, number and suffix extraction."""
    assert match_filename("img5.png") == FilenameMatch("img", 5, ".png")
    assert match_filename("file007.txt") == FilenameMatch("file", 7, ".txt")
    assert match_filename("42") == FilenameMatch("", 42, "")
    assert match_filename("42 answers") == FilenameMatch("", 42, " answers")
    assert match_filename("track 12") == FilenameMatch("track ", 12, "")

    # Only the first digit run is used
    assert match_filename("a12b34c.txt") == FilenameMatch("a", 12, "b34c.txt")
    assert match_filename("IMG_0001 (2).jpg") == FilenameMatch("IMG_", 1, " (2).jpg")

    # Names may contain newlines
    assert match_filename("a\n5.txt") == FilenameMatch("a\n", 5, ".txt")
    assert match_filename("a5\n.txt") == FilenameMatch("a", 5, "\n.txt")


def test_match_filename_no_digits() -> None:
    """Test names without ASCII digits."""
    assert match_filename("note.txt") is None
    assert match_filename("") is None
    assert match_filename(".hidden") is None

    # Non-ASCII digits are not numbers
    assert match_filename("photo٣.jpg") is None
    assert match_filename("１２.txt") is None


def test_match_filename_overflow() -> None:
    """Test digit runs that don't fit in a signed 32-bit integer."""
    assert match_filename(f"x{MAX_NUMBER}.txt") == FilenameMatch("x", MAX_NUMBER, ".txt")
    assert match_filename("x0002147483647.txt") == FilenameMatch("x", MAX_NUMBER, ".txt")

    with pytest.raises(NumberOverflowError) as exc_info:
        match_filename("x2147483648.txt")
    assert exc_info.value.digits == "2147483648"
    assert isinstance(exc_info.value, ValueError)

    with pytest.raises(NumberOverflowError):
        match_filename("scan99999999999999999999.tif")


def test_in_range() -> None:
    """Test inclusive range filtering."""
    assert in_range(5, None, None)
    assert in_range(-5, None, None)

    # Both ends inclusive
    assert in_range(2, 2, 3)
    assert in_range(3, 2, 3)
    assert not in_range(1, 2, 3)
    assert not in_range(4, 2, 3)

    # Open-ended ranges
    assert in_range(100, 2, None)
    assert not in_range(1, 2, None)
    assert in_range(0, None, 0)
    assert not in_range(1, None, 0)

    # Empty range
    assert not in_range(5, 6, 4)


def test_offset_adjuster() -> None:
    """Test offset functions."""
    assert offset_adjuster(10)(5) == 15
    assert offset_adjuster(-1)(9) == 8
    assert offset_adjuster(0)(7) == 7
    assert offset_adjuster(-10)(3) == -7


def test_decimal_digit_count() -> None:
    """Test digit counts, especially at powers of ten."""
    assert decimal_digit_count(0) == 1
    assert decimal_digit_count(9) == 1
    assert decimal_digit_count(10) == 2
    assert decimal_digit_count(99) == 2
    assert decimal_digit_count(100) == 3
    assert decimal_digit_count(MAX_NUMBER) == 10
    assert decimal_digit_count(-MAX_NUMBER - 1) == 10

    # Every power of ten that fits in 32 bits
    for exponent in range(10):
        power = 10**exponent
        assert decimal_digit_count(power) == exponent + 1, power
        assert decimal_digit_count(-power) == exponent + 1, -power
        if exponent > 0:
            assert decimal_digit_count(power - 1) == exponent, power - 1
            assert decimal_digit_count(power + 1) == exponent + 1, power + 1


def test_format_number() -> None:
    """Test zero padding."""
    # No width: natural representation
    assert format_number(15) == "15"
    assert format_number(-7) == "-7"
    assert format_number(0) == "0"

    # Padded to width
    assert format_number(8, 3) == "008"
    assert format_number(0, 2) == "00"
    assert format_number(100, 3) == "100"
    assert format_number(99, 3) == "099"

    # Wider than the width: unchanged
    assert format_number(1234, 3) == "1234"
    assert format_number(1234, 1) == "1234"

    # Sign is not counted towards the width
    assert format_number(-7, 3) == "-007"
    assert format_number(-100, 3) == "-100"


def test_build_filename() -> None:
    """Test filename reconstruction."""
    assert build_filename(FilenameMatch("img", 5, ".png"), offset_adjuster(10)) == "img15.png"
    assert build_filename(FilenameMatch("file", 7, ".txt"), offset_adjuster(1), 3) == "file008.txt"
    assert build_filename(FilenameMatch("b", 9, ".doc"), offset_adjuster(-1)) == "b8.doc"

    # Leading zeros are dropped without a width
    match = match_filename("file007.txt")
    assert match is not None
    assert build_filename(match, offset_adjuster(1)) == "file8.txt"

    # Later digits are left alone
    match = match_filename("a12b34c.txt")
    assert match is not None
    assert build_filename(match, offset_adjuster(1), 4) == "a0013b34c.txt"
