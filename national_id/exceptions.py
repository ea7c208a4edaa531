"""
The single failure raised when text is not a valid Iranian national ID.

`InvalidNationalIdError` deliberately carries no detail about *why* the
input was rejected (too short, non-digit, bad checksum, ...). Callers only
learn that the value is not a national ID.

It subclasses both:
    - `django.core.exceptions.ValidationError`, so Django forms and model
      validation report it as an ordinary field error.
    - `ValueError`, so plain Python callers can catch the usual type.

Example:
    >>> from national_id.utils import normalize_national_id
    >>> normalize_national_id("123")
    Traceback (most recent call last):
        ...
    national_id.exceptions.InvalidNationalIdError: invalid iranian national id number
"""

from django.core.exceptions import ValidationError

from .constants import INVALID_NATIONAL_ID_CODE, INVALID_NATIONAL_ID_MESSAGE


class InvalidNationalIdError(ValidationError, ValueError):
    """
    Raised when a value is not a valid Iranian national ID.

    Two instances always compare equal, since they share the same message
    and code (see `ValidationError.__eq__`).

    Attributes:
        message (str): The translatable message "invalid iranian national id number".
        code (str): Always ``"invalid_national_id"``.
    """

    def __init__(self):
        super().__init__(INVALID_NATIONAL_ID_MESSAGE, code=INVALID_NATIONAL_ID_CODE)

    def __str__(self):
        return str(self.message)

    def __reduce__(self):
        return self.__class__, ()
