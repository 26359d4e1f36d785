"""Brazilian phone number helpers used on the company registration form."""

from __future__ import annotations

import re

from crm_insights.foundation.cnpj import strip_non_digits

# Area code + 8-digit landline or 9-digit mobile
MIN_PHONE_DIGITS = 10
MAX_PHONE_DIGITS = 11

_MOBILE = re.compile(r"([0-9]{2})([0-9]{5})([0-9]{4})")
_LANDLINE = re.compile(r"([0-9]{2})([0-9]{4})([0-9]{4})")


def is_valid_phone(raw: str) -> bool:
    """Return True if ``raw`` has 10 or 11 digits once punctuation is removed."""
    digits = strip_non_digits(raw)
    return MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS


def format_phone(raw: str) -> str:
    """Format a phone number as ``(NN) NNNNN-NNNN`` or ``(NN) NNNN-NNNN``.

    Numbers of any other length are returned as bare digits.

    Examples
    --------
    >>> format_phone("11987654321")
    '(11) 98765-4321'
    >>> format_phone("1132654321")
    '(11) 3265-4321'
    """
    digits = strip_non_digits(raw)
    if len(digits) == MAX_PHONE_DIGITS:
        return _MOBILE.sub(r"(\1) \2-\3", digits)
    if len(digits) == MIN_PHONE_DIGITS:
        return _LANDLINE.sub(r"(\1) \2-\3", digits)
    return digits
