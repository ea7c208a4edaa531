"""
Constants for Iranian national ID (کد ملی) validation.

The national ID is a 10-digit number whose last digit is a control digit
derived from the first nine through a weighted sum modulo 11.

Attributes:
    NATIONAL_ID_LENGTH (int): Number of digits in a national ID.
    BODY_LENGTH (int): Number of digits covered by the weighted sum.
    CHECKSUM_MODULUS (int): Modulus applied to the weighted sum.
    WEIGHTS (tuple[int, ...]): Weight of each body digit (10 down to 2).
    ASCII_DIGITS (str): The only characters accepted as digits.
    INVALID_NATIONAL_ID_MESSAGE (str): Translatable failure message.
    INVALID_NATIONAL_ID_CODE (str): Error code attached to the failure.
"""

from django.utils.translation import gettext_lazy as _

NATIONAL_ID_LENGTH = 10
BODY_LENGTH = NATIONAL_ID_LENGTH - 1
CHECKSUM_MODULUS = 11
WEIGHTS = tuple(range(NATIONAL_ID_LENGTH, 1, -1))

# `str.isdigit()` also accepts Persian and Arabic-Indic digits.
ASCII_DIGITS = "0123456789"

INVALID_NATIONAL_ID_MESSAGE = _("invalid iranian national id number")
INVALID_NATIONAL_ID_CODE = "invalid_national_id"
