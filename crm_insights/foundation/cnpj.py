"""CNPJ (Cadastro Nacional da Pessoa Jurídica) validation and formatting.

A CNPJ is the 14-digit Brazilian company registration number. The first
twelve digits identify the company and branch; the last two are check
digits computed with a weighted modulus-11 scheme.

Validation and formatting are independent. The registration form formats
the value while the user is typing and validates on submission.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"[^0-9]")
_CNPJ_GROUPS = re.compile(r"([0-9]{2})([0-9]{3})([0-9]{3})([0-9]{4})([0-9]{2})")


def strip_non_digits(raw: str) -> str:
    """Return ``raw`` with every character except ASCII digits removed."""
    if not isinstance(raw, str):
        raise TypeError(f"Expected a string, got {type(raw).__name__}")
    return _NON_DIGITS.sub("", raw)


def compute_check_digit(base: str) -> int:
    """Compute the CNPJ check digit for a run of base digits.

    Parameters
    ----------
    base:
        The first 12 digits (for the first check digit) or the first 13
        digits (for the second). Must contain digits only.

    Returns
    -------
    int
        The expected check digit, 0-9.

    Examples
    --------
    >>> compute_check_digit("112223330001")
    8
    >>> compute_check_digit("1122233300018")
    1
    """
    weight = len(base) - 7
    total = 0
    for char in base:
        total += int(char) * weight
        weight -= 1
        if weight < 2:
            weight = 9

    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cnpj(raw: str) -> bool:
    """Check whether ``raw`` holds a valid CNPJ.

    Punctuation is ignored, so ``"11.222.333/0001-81"`` and
    ``"11222333000181"`` are equivalent. Malformed input is a normal
    negative answer and returns ``False``.

    Parameters
    ----------
    raw:
        Identifier as typed by the user.

    Returns
    -------
    bool
        ``True`` only if the stripped value has 14 digits, is not a run of a
        single repeated digit, and both check digits match.

    Raises
    ------
    TypeError
        If ``raw`` is not a string.

    Examples
    --------
    >>> is_valid_cnpj("11.222.333/0001-81")
    True
    >>> is_valid_cnpj("11.222.333/0001-80")
    False
    >>> is_valid_cnpj("00000000000000")
    False
    """
    digits = strip_non_digits(raw)

    if len(digits) != CNPJ_LENGTH:
        logger.debug("CNPJ rejected: %d digits after stripping", len(digits))
        return False

    # Structurally well formed but never issued (e.g. 00.000.000/0000-00)
    if len(set(digits)) == 1:
        logger.debug("CNPJ rejected: repeated digit sequence")
        return False

    size = CNPJ_LENGTH - 2
    for position in range(2):
        expected = compute_check_digit(digits[: size + position])
        if expected != int(digits[size + position]):
            logger.debug("CNPJ rejected: check digit %d mismatch", position + 1)
            return False

    return True


def format_cnpj(raw: str) -> str:
    """Format a CNPJ for display as ``NN.NNN.NNN/NNNN-NN``.

    The value is not validated. Input with fewer than 14 digits is returned
    as its bare digits; digits beyond the fourteenth are appended unchanged
    after the formatted prefix.

    Examples
    --------
    >>> format_cnpj("11222333000181")
    '11.222.333/0001-81'
    >>> format_cnpj("1122")
    '1122'
    """
    digits = strip_non_digits(raw)
    return _CNPJ_GROUPS.sub(r"\1.\2.\3/\4-\5", digits, count=1)
