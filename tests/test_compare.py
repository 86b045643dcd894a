import io

import pytest

from flightcodes import parsing
from flightcodes.compare import compare_lines, describe, main
from flightcodes.parsing import FlightFormatError, FlightNumber


def test_describe_with_code():
    assert describe(FlightNumber("SU", "12")) == "Код авиакомпании: SU. Номер рейса 12"


def test_describe_without_code():
    assert describe(FlightNumber("", "1234")) == (
        "Код авиакомпании: отсутствует. Номер рейса 1234"
    )


def test_compare_lines_default_parser():
    assert compare_lines("SU 0012", "SU12") is True
    assert compare_lines("SU12", "SU13") is False


def test_compare_lines_simple_parser_ignores_case():
    assert compare_lines("SU 0012", "su12", parsing.parse_flight) is True


def test_compare_lines_raises_on_bad_line():
    with pytest.raises(FlightFormatError) as info:
        compare_lines("SU12", "AB-1")
    assert info.value.kind == FlightFormatError.CHARSET


def _run(monkeypatch, text, argv=()):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(list(argv))


def test_main_equal(monkeypatch, capsys):
    assert _run(monkeypatch, "SU 12\nSU0012\n") == 0
    output = capsys.readouterr().out
    assert "1 Код авиакомпании: SU. Номер рейса 12" in output
    assert output.rstrip().endswith("Строки равны.")


def test_main_not_equal(monkeypatch, capsys):
    assert _run(monkeypatch, "1234\nAFL1234\n") == 0
    output = capsys.readouterr().out
    assert "1 Код авиакомпании: отсутствует. Номер рейса 1234" in output
    assert output.rstrip().endswith("Строки не равны.")


def test_main_simple_mode_accepts_lowercase(monkeypatch, capsys):
    assert _run(monkeypatch, "su12\nSU 012\n", ["--simple"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Строки равны.")


def test_main_first_line_too_long(monkeypatch, capsys):
    assert _run(monkeypatch, "12345678\n") == 1
    assert "Неверный размер первой строки." in capsys.readouterr().out


def test_main_second_line_bad_format(monkeypatch, capsys):
    assert _run(monkeypatch, "SU12\nAB-1\n") == 1
    output = capsys.readouterr().out
    assert "Неверный формат второй строки." in output
    assert "латинские символы" in output


def test_main_empty_input(monkeypatch, capsys):
    assert _run(monkeypatch, "") == 1
    assert "Неверный размер первой строки." in capsys.readouterr().out