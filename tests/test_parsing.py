import pytest
from gjstep.parsing import parse_cell, parse_int, parse_matrix, parse_number
from gjstep.types import DimensionError, ParseError

def test_blank_is_zero():
    assert parse_number("") == 0.0
    assert parse_number(" \t ") == 0.0

def test_decimals_and_fractions():
    assert parse_number("2.5") == 2.5
    assert parse_number("+7") == 7.0
    assert parse_number("1e3") == 1000.0
    assert parse_number("\t-3/4") == -0.75
    assert parse_number("1.5/-0.5") == -3.0

def test_numeric_prefix_wins():
    assert parse_number("12abc") == 12.0
    assert parse_number("abc") == 0.0
    assert parse_number("x/2") == 0.0

def test_rejections():
    with pytest.raises(ParseError):
        parse_number("3/0")
    with pytest.raises(ParseError):
        parse_number("3/")
    with pytest.raises(ParseError):
        parse_number("1" * 24 + "/2")
    with pytest.raises(ParseError):
        parse_number(None)

def test_parse_int():
    assert parse_int("3") == 3
    assert parse_int(" -2x") == -2
    for bad in ("", "x", "  "):
        with pytest.raises(ParseError):
            parse_int(bad)

def test_parse_cell_types():
    assert parse_cell(4) == 4.0
    assert parse_cell("2/8") == 0.25
    with pytest.raises(ParseError):
        parse_cell(True)
    with pytest.raises(ParseError):
        parse_cell([1])

def test_parse_matrix():
    m = parse_matrix([["1/2", 1, ""], [0, "-3", "4"]], 2, 3)
    assert m == [[0.5, 1.0, 0.0], [0.0, -3.0, 4.0]]
    with pytest.raises(DimensionError):
        parse_matrix([[1, 2], [3, 4]], 2, 2)
    with pytest.raises(ParseError):
        parse_matrix([[1, 2, 3]], 2, 3)
    with pytest.raises(ParseError):
        parse_matrix([[1, 2, "inf"], [1, 1, 1]], 2, 3)
