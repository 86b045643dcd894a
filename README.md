# flightcodes

Parse and normalise airline flight designators. A designator is an optional
airline code followed by a flight number, seven characters at most, such as
`SU123`, `SU 0123`, `S7 45`, `AFL0012` or `1234`.

## Parsers

There are two parsers. Both return a `FlightNumber`, a frozen dataclass with
`code` and `number` fields, whose `str()` is the code followed by the number.
Both raise `FlightFormatError`, a `ValueError`, for malformed input.

### `flightcodes.parsing.parse_flight`

This parser reads the airline code from the first characters of the line:

- A line that starts with digits has no code.
- Two letters form a code. Three letters also form a code, but only if a
  digit follows them.
- A letter and a digit, in either order, form a code.
- The code is upper-cased, so lower-case input is accepted.
- One whitespace character after the code is dropped. Leading zeros are then
  stripped from the flight number.

### `flightcodes.regex_parsing.parse_flight`

This parser finds the code with a regular-expression search. A line made of
digits only has no code. Otherwise the first match of three capital letters,
two capital letters, or a capital letter and a digit in either order is taken
as the code, together with one trailing space if present. The trailing space
is removed from the returned code. Leading zeros are stripped from the number.
Lower-case letters are not recognised as a code.

### Errors

A line is rejected, and `FlightFormatError` is raised, in these cases:

- it is empty or longer than seven characters (`kind == "size"`);
- it holds anything other than Latin letters, digits and whitespace
  (`kind == "charset"`);
- no valid airline code can be read from it (`kind == "code"`);
- what follows the code is not a run of digits with at least one non-zero
  digit (`kind == "number"`).

The exception carries `line`, `kind` and `hint`, which is a short explanation
in Russian.

The helpers `is_valid_str`, `is_numeric_str`, `get_code`,
`remove_first_space` and `remove_leading_zeros` in `flightcodes.parsing`, and
`get_code` and `remove_last_space` in `flightcodes.regex_parsing`, are also
public.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from flightcodes.parsing import parse_flight, FlightFormatError
from flightcodes.compare import compare_lines, describe
from flightcodes.dedup import unique_flights, process_file

flight = parse_flight("su 0123")      # FlightNumber(code="SU", number="123")
print(describe(flight))               # "Код авиакомпании: SU. Номер рейса 123"

# Two spellings of one flight compare equal.
compare_lines("SU 0123", "SU123", parse_flight)   # True

# Each normalised designator once, in first-seen order.
list(unique_flights(["SU123", "SU 0123", "S7 45"]))   # ["SU123", "S745"]

# The same for a whole file, written one designator per line.
process_file("1_in.txt", "1_out.txt")
```

`compare_lines` uses the regular-expression parser unless you pass another
one. `unique_flights` and `process_file` use `flightcodes.parsing.parse_flight`
and stop with `FlightFormatError` at the first malformed line. Designators
before that line have already been produced.

## Command-line tools

The tools print their messages in Russian.

### flightcodes-compare

```
flightcodes-compare [--simple]
```

The tool prompts for two designators. For each one it prints the airline code
and the flight number, then says whether the two name the same flight. At the
first malformed line it prints an explanation and exits with status 1. By
default it uses the regular-expression parser. `--simple` selects
`flightcodes.parsing.parse_flight` instead.

### flightcodes-dedup

```
flightcodes-dedup [INPUT OUTPUT]...
```

The tool takes pairs of input and output paths and processes the pairs
concurrently. For each input file, it writes each distinct normalised
designator once to the matching output file. With no arguments it processes
`1_in.txt` into `1_out.txt` and `2_in.txt` into `2_out.txt` in the current
directory.

Processing of a file stops at its first malformed line, and the tool reports
that line. If a file cannot be opened, the tool prints `Error opening files`
to standard error. An odd number of paths prints a usage line and exits with
status 2.