"""Tests for display rounding and money formatting."""

from household_settle.finance.money import TOLERANCE, format_money, to_minor_units


class TestToMinorUnits:
    def test_whole_amount(self):
        assert to_minor_units(40) == 4000

    def test_rounds_half_up(self):
        assert to_minor_units(2.675) == 268

    def test_repeating_share(self):
        assert to_minor_units(100 / 3 * 2) == 6667

    def test_negative(self):
        assert to_minor_units(-20) == -2000


class TestFormatMoney:
    def test_positive_padded(self):
        assert format_money(1234.5, "$", use_color=False) == " $1,234.50 "

    def test_negative_in_parentheses(self):
        assert format_money(-20, "$", use_color=False) == "($20.00)"

    def test_noise_below_a_cent_shows_as_zero(self):
        assert format_money(-0.001, "$", use_color=False) == " $0.00 "

    def test_colored_markup(self):
        assert format_money(5, "€") == " [green]€5.00[/green] "


def test_tolerance_value():
    """The tolerance is shared with stored data and must not drift."""
    assert TOLERANCE == 0.004
