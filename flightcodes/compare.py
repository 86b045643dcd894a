"""Interactive comparison of two flight designators."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from flightcodes import parsing, regex_parsing
from flightcodes.parsing import FlightFormatError, FlightNumber

_PROMPTS = (
    ("Введите первую строку: ", "первой"),
    ("Введите вторую строку: ", "второй"),
)


def describe(flight: FlightNumber) -> str:
    """Return a one-line description of *flight*."""
    code = flight.code or "отсутствует"
    return f"Код авиакомпании: {code}. Номер рейса {flight.number}"


def compare_lines(
    first: str,
    second: str,
    parser: Callable[[str], FlightNumber] = regex_parsing.parse_flight,
) -> bool:
    """Return True if both lines denote the same flight.

    Raises FlightFormatError if either line is malformed, checking *first* first.
    """
    return parser(first) == parser(second)


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        print()
        return ""


def main(argv=None) -> int:
    """Read two designators from standard input and report whether they match."""
    arg_parser = argparse.ArgumentParser(
        description="Compare two flight designators."
    )
    arg_parser.add_argument(
        "--simple",
        action="store_true",
        help="locate the airline code by its leading characters instead of a pattern search",
    )
    options = arg_parser.parse_args(argv)
    parse = parsing.parse_flight if options.simple else regex_parsing.parse_flight

    flights = []
    for prompt, ordinal in _PROMPTS:
        line = _read_line(prompt)
        try:
            flights.append(parse(line))
        except FlightFormatError as exc:
            headline = "размер" if exc.kind == FlightFormatError.SIZE else "формат"
            print(f"Неверный {headline} {ordinal} строки.")
            print(exc.hint)
            return 1

    for index, flight in enumerate(flights, start=1):
        print(f"{index} {describe(flight)}")
    first, second = flights
    print("Строки равны." if first == second else "Строки не равны.")
    return 0