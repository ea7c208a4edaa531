"""
Unit tests for the `national_id_validator` Django validator.

Tools:
    - `pytest` for parameterized test cases and assertion handling.
    - `django.forms`: To exercise the validator inside a real form field.
"""

import pytest
from django import forms
from django.core.exceptions import ValidationError

from national_id.validators import national_id_validator
from national_id.values import NationalId


class TestNationalIdValidator:
    """
    Tests for the `national_id_validator` Django validator.
    """

    def test_valid_value_passes(self):
        """
        Ensure that a valid raw string passes without raising.
        """

        assert national_id_validator("0814659438") is None

    def test_national_id_instance_passes(self):
        """
        Ensure that an already-built `NationalId` is accepted as is.
        """

        assert national_id_validator(NationalId("0814659438")) is None

    @pytest.mark.parametrize("invalid_value", ["", "123", "a814659438", "0000000000"])
    def test_invalid_value_raises_validation_error(self, invalid_value):
        """
        Ensure that invalid values raise Django's `ValidationError`
        with the national ID error code.
        """

        with pytest.raises(ValidationError) as exc_info:
            national_id_validator(invalid_value)

        assert exc_info.value.code == "invalid_national_id"

    def test_validator_in_form_field(self):
        """
        Ensure that the validator reports errors through a standard form field.
        """

        class PatientForm(forms.Form):
            national_id = forms.CharField(validators=[national_id_validator])

        assert PatientForm(data={"national_id": "0451726707"}).is_valid()

        form = PatientForm(data={"national_id": "0451726708"})
        assert not form.is_valid()
        assert form.errors["national_id"] == ["invalid iranian national id number"]
