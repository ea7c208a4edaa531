"""
Django REST Framework integration for Iranian national IDs.

This module provides:
    - `NationalIdField`: a serializer field that validates and normalizes
      incoming national IDs into `NationalId` values and renders them back
      as their canonical 10-digit string.
    - `NationalIdSerializer`: a one-field serializer wrapping the field,
      for endpoints or services that only need to accept a national ID.

Both are annotated for drf-spectacular so the generated OpenAPI schema
documents the 10-digit format.

Example:
    >>> serializer = NationalIdSerializer(data={"national_id": " 814659438"})
    >>> serializer.is_valid()
    True
    >>> serializer.validated_data
    {'national_id': NationalId('0814659438')}
    >>> serializer.data
    {'national_id': '0814659438'}
"""

import logging

from drf_spectacular.utils import (
    OpenApiExample,
    extend_schema_field,
    extend_schema_serializer,
)
from rest_framework import serializers
from rest_framework.fields import empty

from .constants import INVALID_NATIONAL_ID_CODE, INVALID_NATIONAL_ID_MESSAGE
from .exceptions import InvalidNationalIdError
from .values import NationalId

logger = logging.getLogger(__name__)


@extend_schema_field(
    {
        "type": "string",
        "pattern": r"^\d{10}$",
        "example": "0814659438",
    }
)
class NationalIdField(serializers.CharField):
    """
    Serializer field for Iranian national IDs.

    **Input**: any string; surrounding whitespace is trimmed and inputs
    shorter than 10 characters are left-padded with zeros.

    **Output**: the canonical 10-digit string for `NationalId` values.
    Any other stored value is rendered with `str()` as is, so a malformed
    legacy value never breaks a response.

    **Blanks**: with ``allow_blank=True`` an empty string validates to
    ``None``, the same as the form field.

    **Errors**: a single ``invalid_national_id`` error, whatever the reason
    for rejection.
    """

    default_error_messages = {
        INVALID_NATIONAL_ID_CODE: INVALID_NATIONAL_ID_MESSAGE,
    }

    def to_internal_value(self, data):
        """
        Validate `data` and return a `NationalId`.

        Raises:
            serializers.ValidationError: If `data` is not a valid national ID.
        """

        value = super().to_internal_value(data)

        try:
            return NationalId(value)
        except InvalidNationalIdError:
            logger.debug("Rejected national ID input of length %d", len(value))
            self.fail(INVALID_NATIONAL_ID_CODE)

    def run_validation(self, data=empty):
        value = super().run_validation(data)
        if value == "":
            return None
        return value

    def to_representation(self, value):
        """Return `value` as text, without re-validating plain strings."""

        if isinstance(value, NationalId):
            return value.value
        return str(value)


@extend_schema_serializer(
    examples=[
        OpenApiExample(
            "Canonical national ID - JSON",
            value={"national_id": "0814659438"},
            description="Exactly 10 digits, including the control digit.",
        ),
        OpenApiExample(
            "Short national ID - Form Data",
            value={"national_id": "814659438"},
            description="Inputs shorter than 10 digits are left-padded with zeros.",
            media_type="multipart/form-data",
        ),
    ],
)
class NationalIdSerializer(serializers.Serializer):
    """
    Serializer accepting a single Iranian national ID.

    **Input Format**:
    - JSON: `{"national_id": "0814659438"}`
    - Form-Data: `national_id=0814659438`

    `validated_data["national_id"]` is a `NationalId`.
    """

    national_id = NationalIdField()
