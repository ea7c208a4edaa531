"""
Django validator for Iranian national IDs.

`national_id_validator` can be listed in the ``validators=[...]`` of any
model, form or serializer field that stores a national ID as text.

Example:
    >>> national_id = models.CharField(
    ...     max_length=10, validators=[national_id_validator]
    ... )
"""

from .utils import normalize_national_id
from .values import NationalId


def national_id_validator(value):
    """
    Validate a raw string or an already-built `NationalId`.

    Blank values are not skipped here; use ``required=False`` on the
    field to allow them.

    Raises:
        InvalidNationalIdError: If the value is not a valid national ID.
    """

    if isinstance(value, NationalId):
        return

    normalize_national_id(value)
