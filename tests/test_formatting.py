import math

from calculator import format_number, format_number_short


def test_whole_numbers_have_no_trailing_zero():
    assert format_number(5.0) == "5"
    assert format_number(-2.0) == "-2"
    assert format_number(10.0) == "10"
    assert format_number(-0.0) == "0"


def test_short_decimals_unchanged():
    assert format_number(2.5) == "2.5"
    assert format_number(0.000015) == "0.000015"


def test_not_a_number_is_friendly():
    assert format_number(math.nan) == "Oops!"
    assert format_number(math.inf) == "Oops!"
    assert format_number(-math.inf) == "Oops!"
    assert format_number_short(math.nan) == "Oops!"


def test_ten_characters_fit():
    assert format_number(1234567890.0) == "1234567890"


def test_long_numbers_use_four_places():
    assert format_number(1 / 3) == "0.3333"
    assert format_number(-1 / 3) == "-0.3333"
    assert format_number(12345678901.0) == "12345678901.0000"


def test_preview_uses_two_places():
    assert format_number_short(1 / 3) == "0.33"
    assert format_number_short(2 / 3) == "0.67"
    assert format_number_short(12.5) == "12.5"


def test_halves_round_away_from_zero():
    assert format_number_short(1234567.125) == "1234567.13"
    assert format_number_short(-1234567.125) == "-1234567.13"


def test_tiny_and_huge_use_exponent():
    assert format_number(1.5e-7) == "1.5e-7"
    assert format_number(1e21) == "1e+21"
    assert format_number(1e20) == "100000000000000000000.0000"
