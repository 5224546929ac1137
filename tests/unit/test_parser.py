import pytest

from gcodeprep.gcode import parser
from gcodeprep.gcode.parser import ArgumentToken, extract_codes, lookup, tokenize


def words(command):
    return [str(t) for t in tokenize(command)]


def test_tokenize_packed_command():
    tokens = tokenize("G1X10.5Y-3.2F500")
    assert words("G1X10.5Y-3.2F500") == ["G1", "X10.5", "Y-3.2", "F500"]
    assert lookup(tokens, "X") == 10.5
    assert lookup(tokens, "Y") == -3.2
    assert lookup(tokens, "F") == 500.0
    assert lookup(tokens, "G") == 1.0


@pytest.mark.parametrize(
    "command,expected",
    [
        ("G1 X10 Y20", ["G1", "X10", "Y20"]),
        ("g2 x1.5 i-.5", ["g2", "x1.5", "i-.5"]),
        ("G 1 X 10", ["G1", "X10"]),
        ("10.5X2", ["10.5", "X2"]),
        ("X10-5", ["X10", "-5"]),
        ("G90", ["G90"]),
        ("", []),
        ("   ", []),
    ],
)
def test_tokenize_word_boundaries(command, expected):
    assert words(command) == expected


def test_tokenize_keeps_source_order_and_duplicates():
    tokens = tokenize("X1 Y2 X3")
    assert [t.address for t in tokens] == ["X", "Y", "X"]
    assert lookup(tokens, "X") == 1.0


def test_letterless_fragment_has_no_address():
    token = tokenize("12.5 X1")[0]
    assert token.address == ""
    assert token.literal == "12.5"
    assert token.value == 12.5


def test_lookup_is_case_insensitive():
    assert lookup("g1 x4.25", "X") == 4.25
    assert lookup("G1 X4.25", "x") == 4.25


def test_lookup_absent_is_none_not_zero():
    assert lookup("G1 X10", "Y") is None


@pytest.mark.parametrize("command", ["G1 X1.2.3", "G1 X-", "G1 XINF", "G1 X.", "G1 XY5"])
def test_malformed_literal_reads_as_absent(command):
    assert lookup(command, "X") is None


def test_first_malformed_occurrence_wins():
    # A later well-formed duplicate is not consulted
    assert lookup("X1.2.3 X5", "X") is None


def test_lookup_accepts_string_or_tokens():
    tokens = tokenize("G2 X10 R5")
    assert lookup(tokens, "R") == lookup("G2 X10 R5", "R") == 5.0


def test_argument_token_properties():
    token = ArgumentToken("y-3.25")
    assert token.address == "Y"
    assert token.literal == "-3.25"
    assert token.value == -3.25
    assert str(token) == "y-3.25"


def test_parse_codes_returns_raw_literals():
    assert parser.parse_codes("G90 G1 X10 g0", "G") == ["90", "1", "0"]


def test_extract_codes_combined_words():
    assert extract_codes("G0G1", "G") == [0, 1]


@pytest.mark.parametrize(
    "command,letter,expected",
    [
        ("G01 X10", "G", [1]),
        ("g00 G0002", "G", [0, 2]),
        ("G90 G91.1", "G", [90, 91]),
        ("M3 S1000 m05", "M", [3, 5]),
        ("X10 Y20", "G", []),
        ("G21 G2", "g", [21, 2]),
    ],
)
def test_extract_codes(command, letter, expected):
    assert extract_codes(command, letter) == expected


def test_parse_gcodes_and_mcodes():
    assert parser.parse_gcodes("G17 G2 M3") == [17, 2]
    assert parser.parse_mcodes("G17 G2 M3 M8") == [3, 8]


def test_tokenize_is_linear_on_long_input():
    command = "X1" * 5000
    tokens = tokenize(command)
    assert len(tokens) == 5000
    assert all(t.value == 1.0 for t in tokens)
