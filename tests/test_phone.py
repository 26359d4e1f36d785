"""Tests for phone number helpers."""

from crm_insights.foundation.phone import format_phone, is_valid_phone


class TestIsValidPhone:
    """Test is_valid_phone."""

    def test_mobile_number(self):
        """11-digit mobile numbers are valid."""
        assert is_valid_phone("(11) 98765-4321") is True

    def test_landline_number(self):
        """10-digit landline numbers are valid."""
        assert is_valid_phone("11 3265-4321") is True

    def test_too_short(self):
        """Numbers without area code are invalid."""
        assert is_valid_phone("98765-4321") is False

    def test_too_long(self):
        """Numbers with country code are outside the accepted range."""
        assert is_valid_phone("+55 11 98765-4321") is False


class TestFormatPhone:
    """Test format_phone."""

    def test_mobile(self):
        assert format_phone("11987654321") == "(11) 98765-4321"

    def test_landline(self):
        assert format_phone("1132654321") == "(11) 3265-4321"

    def test_other_length_returns_digits(self):
        """Unrecognised lengths are returned as bare digits."""
        assert format_phone("+55 (11) 98765-4321") == "5511987654321"
