"""Flight designator parsing that locates the airline code with a pattern search."""

from __future__ import annotations

import re

from flightcodes.parsing import (
    MAX_LINE_LENGTH,
    FlightFormatError,
    FlightNumber,
    is_numeric_str,
    is_valid_str,
    remove_leading_zeros,
)

_CODE_PATTERN = re.compile(
    r"([A-Z][A-Z][A-Z])|([A-Z][A-Z] )|([A-Z][A-Z])|([A-Z][0-9] )"
    r"|([0-9][A-Z] )|([A-Z][0-9])|([0-9][A-Z])"
)
_WHITESPACE = " \t\n\r\v\f"


def get_code(text: str) -> str:
    """Return the first code-shaped match in *text*, trailing space included.

    A purely numeric line has no code and yields an empty string.
    """
    if not text:
        raise FlightFormatError(text, FlightFormatError.CODE)
    if is_numeric_str(text):
        return ""
    match = _CODE_PATTERN.search(text)
    if match is None:
        raise FlightFormatError(text, FlightFormatError.CODE)
    return match.group(0)


def remove_last_space(text: str) -> str:
    """Drop a single trailing whitespace character, if there is one."""
    if text and text[-1] in _WHITESPACE:
        return text[:-1]
    return text


def parse_flight(line: str) -> FlightNumber:
    """Parse *line* into a FlightNumber, raising FlightFormatError if it is malformed."""
    if not 1 <= len(line) <= MAX_LINE_LENGTH:
        raise FlightFormatError(line, FlightFormatError.SIZE)
    if not is_valid_str(line):
        raise FlightFormatError(line, FlightFormatError.CHARSET)
    raw_code = get_code(line)
    number = remove_leading_zeros(line[len(raw_code):])
    if not is_numeric_str(number):
        raise FlightFormatError(line, FlightFormatError.NUMBER)
    return FlightNumber(remove_last_space(raw_code), number)