"""Tests for driver license masking."""

import pytest

from fleetform.masking.license import format_license


class TestFormatLicense:
    """Tests for format_license."""

    def test_complete_license(self) -> None:
        """State code plus 13 digits is masked and valid."""
        result = format_license("mh1420110062821")
        assert result.formatted_value == "MH-1420110062821"
        assert result.is_valid is True

    def test_existing_hyphens_stripped(self) -> None:
        """User-typed hyphens and spaces are replaced by the single mask hyphen."""
        result = format_license("MH-14-2011 0062821")
        assert result.formatted_value == "MH-1420110062821"
        assert result.is_valid is True

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("m", "M"), ("mh", "MH"), ("mh1", "MH-1"), ("mh14201", "MH-14201")],
    )
    def test_hyphen_only_after_two_characters(self, raw: str, expected: str) -> None:
        """The hyphen is inserted once more than two characters are present."""
        result = format_license(raw)
        assert result.formatted_value == expected
        assert result.is_valid is False

    def test_overlong_input_clipped_to_fifteen(self) -> None:
        """Input is truncated to 15 characters before the hyphen goes in."""
        result = format_license("mh142011006282199")
        assert result.formatted_value == "MH-1420110062821"
        assert result.is_valid is True

    def test_digits_in_state_code_invalid(self) -> None:
        """Masking does not check classes; validity does."""
        result = format_license("1234567890123456")
        assert result.formatted_value == "12-3456789012345"
        assert result.is_valid is False

    def test_letter_in_digit_run_invalid(self) -> None:
        """A letter among the 13 digits fails the grammar."""
        assert format_license("ab12345678901x3").is_valid is False
