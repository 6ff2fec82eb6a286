"""Tests for null-tolerant money arithmetic."""
from decimal import Decimal

from ordering.domain.value_objects import ZERO, line_amount, line_profit, to_amount, total


class TestLineArithmetic:
    """Line totals and profit."""

    def test_line_amount(self):
        assert line_amount(2, Decimal("0.8")) == Decimal("1.6")

    def test_line_amount_absent_quantity(self):
        assert line_amount(None, Decimal("0.8")) == ZERO

    def test_line_amount_absent_unit_amount(self):
        assert line_amount(3, None) == ZERO

    def test_line_profit(self):
        assert line_profit(2, Decimal("0.8"), Decimal("0.9")) == Decimal("0.2")

    def test_line_profit_absent_cost_counts_as_zero(self):
        assert line_profit(2, None, Decimal("2.5")) == Decimal("5.0")

    def test_line_profit_absent_price_counts_as_zero(self):
        assert line_profit(1, Decimal("1.5"), None) == Decimal("-1.5")

    def test_results_are_decimal(self):
        assert isinstance(line_amount(None, None), Decimal)
        assert isinstance(line_profit(None, None, None), Decimal)

    def test_to_amount_converts_without_float_noise(self):
        assert to_amount(0.1) == Decimal("0.1")

    def test_total_of_nothing_is_zero(self):
        assert total([]) == ZERO
        assert total([Decimal("1.6"), Decimal("1.6")]) == Decimal("3.2")
