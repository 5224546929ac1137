import pytest

from gcodeprep.gcode.text import (
    clean_command,
    override_speed,
    parse_comment,
    remove_all_whitespace,
    remove_comment,
    truncate_decimals,
)


@pytest.mark.parametrize(
    "command,expected",
    [
        ("G1 X10 (move) Y5 ; note", "G1 X10  Y5"),
        ("(header only)", ""),
        ("((nested)) G0", "G0"),
        ("G0 X1;rapid", "G0 X1"),
        ("  G1 X2  ", "G1 X2"),
    ],
)
def test_remove_comment(command, expected):
    assert remove_comment(command) == expected


@pytest.mark.parametrize(
    "command,expected",
    [
        ("G1 X1 (tool change)", "(tool change)"),
        ("G1 ;rapid", ";rapid"),
        ("G1 X1", ""),
    ],
)
def test_parse_comment(command, expected):
    assert parse_comment(command) == expected


def test_remove_all_whitespace():
    assert remove_all_whitespace("G1 X 1\tY2\n") == "G1X1Y2"


def test_clean_command_is_single_line():
    assert clean_command("G1  X1\r\n Y2 (c) ; tail") == "G1 X1 Y2"


@pytest.mark.parametrize(
    "length,command,expected",
    [
        (2, "G1 X1.23456 Y-0.5 Z10", "G1 X1.23 Y-0.50 Z10"),
        (3, "X.5", "X0.500"),
        (0, "X12.7", "X13"),
        (4, "G1 F500", "G1 F500"),
    ],
)
def test_truncate_decimals(length, command, expected):
    assert truncate_decimals(length, command) == expected


@pytest.mark.parametrize(
    "command,percent,expected",
    [
        ("G1 X10 F500", 50, "G1 X10 F250"),
        ("G1 F1200.5", 200, "G1 F2401"),
        ("G1 X10", 50, "G1 X10"),
        ("g1 x1 f100", 150, "g1 x1 f150"),
        ("F100 G1 F200", 50, "F50 G1 F100"),
        ("G1 F300", 100, "G1 F300"),
    ],
)
def test_override_speed(command, percent, expected):
    assert override_speed(command, percent) == expected
