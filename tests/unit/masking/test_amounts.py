"""Tests for currency and odometer masking."""

import pytest

from fleetform.masking.amounts import AmountState, format_amount, format_odometer, is_decimal, step


class TestFormatAmount:
    """Tests for format_amount."""

    def test_extra_separators_dropped(self) -> None:
        """Only the first separator is kept."""
        result = format_amount("12.34.56")
        assert result.formatted_value == "12.3456"
        assert result.is_valid is True

    def test_digit_cap(self) -> None:
        """At most eight digits, separator not counted."""
        assert format_amount("123456789").formatted_value == "12345678"
        assert format_amount("1234.56789").formatted_value == "1234.5678"

    def test_custom_digit_cap(self) -> None:
        assert format_amount("123456", max_digits=4).formatted_value == "1234"

    def test_currency_symbols_and_grouping_dropped(self) -> None:
        """Symbols and thousands separators are filtered out."""
        result = format_amount("$1,299.50")
        assert result.formatted_value == "1299.50"
        assert result.is_valid is True

    def test_minus_sign_dropped(self) -> None:
        """Amounts are never negative."""
        assert format_amount("-12").formatted_value == "12"

    @pytest.mark.parametrize("raw", [".5", "5.", "0", "0.00"])
    def test_valid_decimals(self, raw: str) -> None:
        assert format_amount(raw).is_valid is True

    def test_lone_separator_invalid(self) -> None:
        """A separator without digits does not parse."""
        result = format_amount(".")
        assert result.formatted_value == "."
        assert result.is_valid is False

    def test_separator_kept_after_digit_cap(self) -> None:
        """Reaching the cap still allows the separator itself."""
        assert format_amount("12345678.9").formatted_value == "12345678."


class TestAmountStep:
    """Tests for the amount reducer."""

    def test_second_separator_ignored(self) -> None:
        state = AmountState("1.2", 2, True)
        assert step(state, ".") == state

    def test_digit_counted(self) -> None:
        assert step(AmountState(), "7") == AmountState("7", 1, False)


class TestIsDecimal:
    """Tests for is_decimal."""

    def test_parses(self) -> None:
        assert is_decimal("12.50") is True

    def test_rejects_garbage(self) -> None:
        assert is_decimal("") is False
        assert is_decimal("1.2.3") is False


class TestFormatOdometer:
    """Tests for format_odometer."""

    def test_digits_only(self) -> None:
        result = format_odometer("45,210 km")
        assert result.formatted_value == "45210"
        assert result.is_valid is True

    def test_clipped(self) -> None:
        assert format_odometer("123456789").formatted_value == "1234567"
