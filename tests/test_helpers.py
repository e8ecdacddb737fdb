from pathlib import Path

import pytest

from helpers import export_paths, format_length, format_number, parse_line_widths, sanitize_filename, split_filename


@pytest.mark.parametrize(
    "value, expected",
    [(10, "10"), (-10.0, "-10"), (0.0, "0"), (7.75, "7.75"), (1 / 3, "0.3333333333333333"), (10.000000000000002, "10.000000000000002")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value", [1000.25, 1000.75, 123456.7, 123466.7, -0.001234567])
def test_format_number_reads_back_exactly(value):
    assert float(format_number(value)) == value


@pytest.mark.parametrize(
    "value, expected",
    [(10.000000000000002, "10"), (7.75, "7.75"), (8, "8"), (3.14159265, "3.1416")],
)
def test_format_length(value, expected):
    assert format_length(value) == expected


def test_split_filename_lowercases_extension():
    assert split_filename("plots/out.TikZ") == (Path("plots"), "out", ".tikz")


def test_export_paths_single_axis_keeps_name():
    assert export_paths("plots/out.tikz", 1) == [(Path("plots/out.pdf"), Path("plots/out.tikz"))]


def test_export_paths_numbers_multiple_axes():
    assert export_paths("out.tex", 3) == [
        (Path("out-1.pdf"), Path("out-1.tex")),
        (Path("out-2.pdf"), Path("out-2.tex")),
        (Path("out-3.pdf"), Path("out-3.tex")),
    ]


def test_parse_line_widths():
    assert parse_line_widths("") is None
    assert parse_line_widths("  2 ") == [2.0]
    assert parse_line_widths("1, 2.5; 3") == [1.0, 2.5, 3.0]
    with pytest.raises(ValueError):
        parse_line_widths("thick")


def test_sanitize_filename():
    assert sanitize_filename("Messung 3 (Kanal A)") == "messung_3_kanal_a.tikz"
    assert sanitize_filename("???", ext=".pdf") == "figure.pdf"
