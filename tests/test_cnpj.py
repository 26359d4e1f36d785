"""Tests for CNPJ validation and formatting."""

import pytest

from crm_insights.foundation.cnpj import (
    compute_check_digit,
    format_cnpj,
    is_valid_cnpj,
    strip_non_digits,
)


class TestStripNonDigits:
    """Test strip_non_digits helper."""

    def test_removes_punctuation(self):
        """Dots, slash and dash are removed."""
        assert strip_non_digits("11.222.333/0001-81") == "11222333000181"

    def test_removes_letters_and_spaces(self):
        """Any non-digit character is removed."""
        assert strip_non_digits(" CNPJ: 11 222 ") == "11222"

    def test_non_string_raises_error(self):
        """None is a contract violation, not a negative answer."""
        with pytest.raises(TypeError, match="Expected a string"):
            strip_non_digits(None)


class TestComputeCheckDigit:
    """Test the weighted modulus-11 check digit."""

    def test_first_check_digit(self):
        """First check digit uses 12 base digits."""
        assert compute_check_digit("112223330001") == 8

    def test_second_check_digit(self):
        """Second check digit uses 13 base digits including the first."""
        assert compute_check_digit("1122233300018") == 1

    def test_remainder_below_two_gives_zero(self):
        """Remainders 0 and 1 map to check digit 0."""
        # weighted sum 12 -> remainder 1
        assert compute_check_digit("000000000006") == 0
        # weighted sum 0 -> remainder 0
        assert compute_check_digit("000000000000") == 0

    def test_remainder_two_or_more(self):
        """Other remainders map to 11 - remainder."""
        # weighted sum 2 -> remainder 2
        assert compute_check_digit("000000000001") == 9


class TestIsValidCNPJ:
    """Test is_valid_cnpj."""

    def test_known_valid_punctuated(self):
        """Well-known test identifier is valid."""
        assert is_valid_cnpj("11.222.333/0001-81") is True

    def test_known_valid_bare_digits(self):
        """Punctuation is optional."""
        assert is_valid_cnpj("11222333000181") is True

    def test_second_known_valid(self):
        """Another valid identifier exercising the weight wrap-around."""
        assert is_valid_cnpj("11.444.777/0001-61") is True

    def test_corrupted_last_digit(self):
        """Wrong second check digit is rejected."""
        assert is_valid_cnpj("11.222.333/0001-80") is False

    def test_corrupted_first_check_digit(self):
        """Wrong first check digit is rejected."""
        assert is_valid_cnpj("11.222.333/0001-71") is False

    def test_corrupted_base_digit(self):
        """A changed base digit invalidates the check digits."""
        assert is_valid_cnpj("11.222.334/0001-81") is False

    @pytest.mark.parametrize("digit", "0123456789")
    def test_repeated_digits_rejected(self, digit):
        """Fourteen identical digits are never valid."""
        assert is_valid_cnpj(digit * 14) is False

    @pytest.mark.parametrize(
        "raw",
        ["", "1122233300018", "112223330001811", "11.222.333/0001", "abc"],
    )
    def test_wrong_length_rejected(self, raw):
        """Anything that does not strip to 14 digits is invalid."""
        assert is_valid_cnpj(raw) is False

    def test_deterministic(self):
        """Repeated calls give the same answer."""
        assert is_valid_cnpj("11.222.333/0001-81") == is_valid_cnpj("11.222.333/0001-81")

    def test_none_raises_type_error(self):
        """None is a contract violation."""
        with pytest.raises(TypeError):
            is_valid_cnpj(None)


class TestFormatCNPJ:
    """Test format_cnpj."""

    def test_formats_bare_digits(self):
        """Template NN.NNN.NNN/NNNN-NN is applied."""
        assert format_cnpj("11222333000181") == "11.222.333/0001-81"

    def test_reformats_messy_input(self):
        """Existing punctuation is discarded before formatting."""
        assert format_cnpj("11 222 333-0001/81") == "11.222.333/0001-81"

    def test_idempotent(self):
        """Formatting formatted input is a no-op."""
        once = format_cnpj("11222333000181")
        assert format_cnpj(once) == once

    def test_does_not_validate(self):
        """Invalid check digits are still formatted."""
        assert format_cnpj("11222333000180") == "11.222.333/0001-80"

    def test_short_input_returns_digits(self):
        """Draft input shorter than 14 digits comes back as bare digits."""
        assert format_cnpj("11.222") == "11222"

    def test_long_input_keeps_extra_digits(self):
        """Digits beyond the template are appended unchanged."""
        assert format_cnpj("112223330001819") == "11.222.333/0001-819"
