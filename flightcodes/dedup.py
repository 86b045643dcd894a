"""Write the distinct flight designators of input files to output files."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from flightcodes.parsing import FlightFormatError, parse_flight

DEFAULT_JOBS = (("1_in.txt", "1_out.txt"), ("2_in.txt", "2_out.txt"))


def unique_flights(lines: Iterable[str]) -> Iterator[str]:
    """Yield each normalised designator the first time it is seen.

    Lines may end with a newline. Raises FlightFormatError at the first
    malformed line; designators before it have already been yielded.
    """
    seen: set[str] = set()
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        combination = str(parse_flight(line))
        if combination not in seen:
            seen.add(combination)
            yield combination


def process_file(input_path, output_path) -> None:
    """Write the distinct designators of *input_path* to *output_path*, one per line."""
    with open(output_path, "w", encoding="utf-8") as out, open(
        input_path, encoding="utf-8", errors="replace", newline="\n"
    ) as inp:
        for combination in unique_flights(inp):
            out.write(combination + "\n")


def _run_job(job: tuple[str, str]) -> tuple[str, str]:
    out, err = io.StringIO(), io.StringIO()
    try:
        process_file(*job)
    except FlightFormatError as exc:
        print(f'Ошибка в записи"{exc.line}".', file=out)
        print(exc.hint, file=out)
    except OSError:
        print("Error opening files", file=err)
    return out.getvalue(), err.getvalue()


def main(argv=None) -> int:
    """Process input/output path pairs concurrently; defaults to DEFAULT_JOBS."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) % 2:
        print("usage: dedup [INPUT OUTPUT]...", file=sys.stderr)
        return 2
    jobs = list(zip(args[::2], args[1::2])) or list(DEFAULT_JOBS)
    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        reports = list(pool.map(_run_job, jobs))
    for out_text, err_text in reports:
        sys.stdout.write(out_text)
        sys.stderr.write(err_text)
    return 0