"""
Immutable value type for a validated Iranian national ID.

A `NationalId` can only be obtained by passing text through
`normalize_national_id`: the dataclass constructor runs the validator and
stores the canonical form, so any instance held by downstream code is
already known to be valid and never needs re-checking.

Features:
    - Canonical 10-digit string available as `.value` and `str(nid)`.
    - Equality, ordering and hashing on the canonical form.
    - Never equal to a plain `str`, even one holding the same digits.
    - Frozen: assigning or deleting attributes raises `FrozenInstanceError`.

Example:
    >>> nid = NationalId(" 814659438 ")
    >>> nid
    NationalId('0814659438')
    >>> str(nid)
    '0814659438'
    >>> nid.control_digit
    8
    >>> nid == NationalId("0814659438")
    True
    >>> nid == "0814659438"
    False
"""

from dataclasses import dataclass

from .constants import BODY_LENGTH
from .utils import normalize_national_id


@dataclass(frozen=True, order=True)
class NationalId:
    """
    A validated Iranian national ID.

    Attributes:
        value (str): The canonical form: exactly 10 ASCII digits, zero-padded.

    Raises:
        InvalidNationalIdError: On construction, if the input is not a valid
            national ID.
    """

    value: str

    def __post_init__(self) -> None:
        """Replace the raw input with its validated canonical form."""
        object.__setattr__(self, "value", normalize_national_id(self.value))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    @property
    def body(self) -> str:
        """The first nine digits, covered by the checksum."""
        return self.value[:BODY_LENGTH]

    @property
    def control_digit(self) -> int:
        """The tenth digit, derived from `body`."""
        return int(self.value[BODY_LENGTH])
