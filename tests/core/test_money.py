from decimal import Decimal

from src.shared.utils.money import format_currency, round_money, to_float


class TestRoundMoney:
    """Tests for round_money function."""

    def test_round_half_up(self):
        """Test ROUND_HALF_UP behavior."""
        assert round_money(10.125) == Decimal("10.13")
        assert round_money(10.124) == Decimal("10.12")
        assert round_money(10.145) == Decimal("10.15")

    def test_from_decimal(self):
        assert round_money(Decimal("99.999")) == Decimal("100.00")

    def test_from_string(self):
        assert round_money("10.125") == Decimal("10.13")
        assert round_money("0.001") == Decimal("0.00")

    def test_negative_numbers(self):
        assert round_money(-10.125) == Decimal("-10.12")  # rounds toward zero
        assert round_money(-10.126) == Decimal("-10.13")

    def test_precision(self):
        """Test that result always has 2 decimal places."""
        assert str(round_money(10)) == "10.00"
        assert str(round_money(10.1)) == "10.10"


class TestToFloat:
    """Aggregates arrive as Decimal, int or NULL and leave as float."""

    def test_decimal(self):
        result = to_float(Decimal("370.00"))
        assert result == 370.0
        assert isinstance(result, float)

    def test_int(self):
        result = to_float(42)
        assert result == 42.0
        assert isinstance(result, float)

    def test_none_is_zero(self):
        assert to_float(None) == 0.0

    def test_numeric_string(self):
        assert to_float("12.50") == 12.5


class TestFormatCurrency:
    def test_thousands_separator(self):
        assert format_currency(1234.5) == "$1,234.50"

    def test_zero(self):
        assert format_currency(Decimal("0")) == "$0.00"

    def test_negative(self):
        assert format_currency(Decimal("-12")) == "-$12.00"
