"""Parsing of airline flight designators such as ``SU 0012`` or ``AFL123``."""

from __future__ import annotations

import string
from dataclasses import dataclass

MAX_LINE_LENGTH = 7

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_WHITESPACE = frozenset(" \t\n\r\v\f")
_ALLOWED = _DIGITS | _LETTERS | _WHITESPACE

_HINTS = {
    "size": "Максимальный размер строки — 7 символов. Минимальный - 1 символ.",
    "charset": "Строка может содержать латинские символы, цифры и пробел.",
    "code": 'См. п. "Код авиакомпании".',
    "number": (
        "Номер рейса может быть представлен набором цифр от 0 до 9 "
        "размером от 1 до 5 цифры."
    ),
}


class FlightFormatError(ValueError):
    """Raised when a line is not a valid flight designator."""

    SIZE = "size"
    CHARSET = "charset"
    CODE = "code"
    NUMBER = "number"

    def __init__(self, line: str, kind: str) -> None:
        self.line = line
        self.kind = kind
        self.hint = _HINTS[kind]
        super().__init__(f"{line!r}: {self.hint}")


@dataclass(frozen=True)
class FlightNumber:
    """An airline code (possibly empty) and a flight number without leading zeros."""

    code: str
    number: str

    def __str__(self) -> str:
        return self.code + self.number


def is_valid_str(text: str) -> bool:
    """Return True if *text* is non-empty and holds only Latin letters, digits and spaces."""
    return bool(text) and all(ch in _ALLOWED for ch in text)


def is_numeric_str(text: str) -> bool:
    """Return True if *text* is non-empty and holds only decimal digits."""
    return bool(text) and all(ch in _DIGITS for ch in text)


def get_code(text: str) -> str:
    """Return the upper-cased airline code at the start of *text*.

    An empty string means the line carries no code. Raises FlightFormatError
    when the leading characters cannot form a code.
    """
    if not text:
        raise FlightFormatError(text, FlightFormatError.CODE)

    def at(index: int) -> str:
        return text[index] if index < len(text) else "\0"

    first, second = at(0), at(1)
    if first in _DIGITS and (second in _DIGITS or len(text) == 1):
        return ""
    if len(text) > 1 and first in _LETTERS and second in _LETTERS:
        length = 2
        if len(text) > 2 and at(2) in _LETTERS:
            if at(3) not in _DIGITS:
                raise FlightFormatError(text, FlightFormatError.CODE)
            length = 3
        return text[:length].upper()
    if (len(text) > 1 and first in _DIGITS and second in _LETTERS) or (
        first in _LETTERS and second in _DIGITS
    ):
        return text[:2].upper()
    raise FlightFormatError(text, FlightFormatError.CODE)


def remove_first_space(text: str) -> str:
    """Drop a single leading whitespace character, if there is one."""
    if text and text[0] in _WHITESPACE:
        return text[1:]
    return text


def remove_leading_zeros(text: str) -> str:
    """Drop all leading ``0`` characters."""
    return text.lstrip("0")


def parse_flight(line: str) -> FlightNumber:
    """Parse *line* into a FlightNumber, raising FlightFormatError if it is malformed."""
    if not 1 <= len(line) <= MAX_LINE_LENGTH:
        raise FlightFormatError(line, FlightFormatError.SIZE)
    if not is_valid_str(line):
        raise FlightFormatError(line, FlightFormatError.CHARSET)
    code = get_code(line)
    number = remove_leading_zeros(remove_first_space(line[len(code):]))
    if not is_numeric_str(number):
        raise FlightFormatError(line, FlightFormatError.NUMBER)
    return FlightNumber(code, number)