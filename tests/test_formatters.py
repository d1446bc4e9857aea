import math
from gjstep.formatters import continued_fraction, format_frac, format_row, render_matrix, small_val
from gjstep.steplog import StepLog

def test_repeating_decimal_recovers_third():
    assert format_frac(0.3333333333) == "1/3"

def test_tiny_value_is_zero():
    assert format_frac(1e-13) == "0"
    assert format_frac(-5e-15) == "0"

def test_near_integers_print_bare():
    assert format_frac(5.0) == "5"
    assert format_frac(3.0000000000001) == "3"
    assert format_frac(-7.0) == "-7"
    assert format_frac(-2.9999999999999) == "-3"
    assert "/" not in format_frac(1e6)

def test_non_finite():
    assert format_frac(float("nan")) == "NaN"
    assert format_frac(float("inf")) == "inf"
    assert format_frac(float("-inf")) == "-inf"

def test_fraction_round_trip():
    for d in range(1, 1001):
        for n in (1, d - 1, d + 1, -(2 * d + 1), 7 * d + 3):
            if n == 0 or math.gcd(n, d) != 1:
                continue
            expected = str(n) if d == 1 else f"{n}/{d}"
            assert format_frac(n / d) == expected, (n, d)

def test_sign_lives_on_numerator():
    assert format_frac(-0.75) == "-3/4"
    assert format_frac(-1.5) == "-3/2"

def test_cap_keeps_previous_convergent():
    # next convergent of pi after 355/113 has denominator 33102
    assert continued_fraction(math.pi) == (355, 113)
    assert format_frac(math.pi) == "355/113"

def test_small_val_snaps_residue_and_bounds_width():
    assert small_val(4e-13) == "0"
    assert small_val(-0.2 + 1e-17) == "-1/5"
    assert len(small_val(123456789.123)) <= 15

def test_row_and_matrix_rendering():
    assert format_row([2.0, 1.0, 1.0, 5.0], 4) == "  [ 2 1 1 | 5 ]"
    assert format_row([0.5, -0.25, 1 / 3], 3) == "  [ 1/2 -1/4 | 1/3 ]"
    log = StepLog()
    render_matrix(log, [[1.0, 2.0, 3.0], [0.0, 1.0, 1e-13]], 2, 3)
    assert log.lines() == ("Matrix [A | b]:", "  [ 1 2 | 3 ]", "  [ 0 1 | 0 ]", "")

def test_wide_rows_are_cut_to_line_width():
    row = [123456.789012, -98765.4321, 55555.12345, 0.123456789]
    assert len(format_row(row, 4)) <= 55
