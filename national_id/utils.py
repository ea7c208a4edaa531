"""
Validation and normalization utilities for Iranian national IDs.

This module provides:
- `normalize_national_id`: the validator. Turns arbitrary text into the
  canonical 10-digit form or raises `InvalidNationalIdError`.
- `is_valid_national_id`: a boolean predicate over the same algorithm.
- `compute_control_digit`: the control digit for a nine-digit body.

Algorithm:
    1. Strip surrounding whitespace.
    2. Left-pad with ``"0"`` up to 10 characters (longer input is kept as is).
    3. Require exactly 10 characters, all of them ASCII digits.
    4. Weighted sum ``S`` of the first nine digits with weights 10..2.
    5. Reject ``S == 0`` (e.g. ``"0000000000"``).
    6. With ``r = S % 11`` the control digit must equal ``r`` when
       ``r < 2`` and ``11 - r`` otherwise.

Examples:
    >>> normalize_national_id("0451726707")
    '0451726707'
    >>> normalize_national_id("  40010007 ")
    '0040010007'
    >>> is_valid_national_id("0000000000")
    False
    >>> compute_control_digit("081465943")
    8
"""

from .constants import (
    ASCII_DIGITS,
    BODY_LENGTH,
    CHECKSUM_MODULUS,
    NATIONAL_ID_LENGTH,
    WEIGHTS,
)
from .exceptions import InvalidNationalIdError


def _weighted_sum(digits):
    return sum(digit * weight for digit, weight in zip(digits, WEIGHTS))


def _control_digit_for(total: int) -> int:
    remainder = total % CHECKSUM_MODULUS
    if remainder < 2:
        return remainder
    return CHECKSUM_MODULUS - remainder


def normalize_national_id(value: str) -> str:
    """
    Validate a national ID and return its canonical 10-digit form.

    Args:
        value (str): Raw input. Surrounding whitespace is ignored and
            inputs shorter than 10 characters are left-padded with zeros.

    Returns:
        str: The zero-padded, digits-only national ID.

    Raises:
        InvalidNationalIdError: If the input is not text, does not consist
            of exactly 10 digits after padding, has an all-zero body, or
            fails the checksum.

    Examples:
        >>> normalize_national_id("814659438")
        '0814659438'
        >>> normalize_national_id("12345678ab")
        Traceback (most recent call last):
            ...
        national_id.exceptions.InvalidNationalIdError: invalid iranian national id number
    """

    if not isinstance(value, str):
        raise InvalidNationalIdError()

    padded = value.strip().rjust(NATIONAL_ID_LENGTH, "0")

    # Longer input is never truncated, so every character must be a digit.
    if len(padded) != NATIONAL_ID_LENGTH or any(
        char not in ASCII_DIGITS for char in padded
    ):
        raise InvalidNationalIdError()

    digits = [int(char) for char in padded]

    total = _weighted_sum(digits[:BODY_LENGTH])
    if total == 0:
        raise InvalidNationalIdError()

    if digits[BODY_LENGTH] != _control_digit_for(total):
        raise InvalidNationalIdError()

    return padded


def is_valid_national_id(value) -> bool:
    """
    Return True if `value` is a valid national ID, False otherwise.

    Example:
        >>> is_valid_national_id("0814659438")
        True
        >>> is_valid_national_id("a814659438")
        False
    """

    try:
        normalize_national_id(value)
    except InvalidNationalIdError:
        return False
    return True


def compute_control_digit(body: str) -> int:
    """
    Compute the control digit for the first nine digits of a national ID.

    Args:
        body (str): Exactly nine ASCII digits, not all zero.

    Returns:
        int: The digit that completes `body` into a valid national ID.

    Raises:
        InvalidNationalIdError: If `body` is not nine ASCII digits or
            its weighted sum is zero.
    """

    if (
        not isinstance(body, str)
        or len(body) != BODY_LENGTH
        or any(char not in ASCII_DIGITS for char in body)
    ):
        raise InvalidNationalIdError()

    total = _weighted_sum(int(char) for char in body)
    if total == 0:
        raise InvalidNationalIdError()

    return _control_digit_for(total)
