"""
Unit tests for `InvalidNationalIdError`.

The failure is a single opaque kind: every rejection produces an equal
error with the same message and code, whatever the reason.
"""

import pickle

import pytest
from django.core.exceptions import ValidationError
from django.utils.functional import Promise

from national_id.exceptions import InvalidNationalIdError
from national_id.utils import normalize_national_id


class TestInvalidNationalIdError:
    def test_message_and_code(self):
        error = InvalidNationalIdError()

        assert str(error) == "invalid iranian national id number"
        assert error.code == "invalid_national_id"
        assert error.messages == ["invalid iranian national id number"]

    def test_is_validation_error_and_value_error(self):
        """
        Ensure that both Django code and plain Python callers can catch it.
        """

        with pytest.raises(ValueError):
            normalize_national_id("123")

        with pytest.raises(ValidationError):
            normalize_national_id("123")

    def test_errors_compare_equal(self):
        """
        Ensure that errors raised for different reasons are indistinguishable.
        """

        with pytest.raises(InvalidNationalIdError) as too_short:
            normalize_national_id("123")
        with pytest.raises(InvalidNationalIdError) as bad_char:
            normalize_national_id("a814659438")
        with pytest.raises(InvalidNationalIdError) as zero_sum:
            normalize_national_id("0000000000")

        assert too_short.value == bad_char.value == zero_sum.value
        assert InvalidNationalIdError() == InvalidNationalIdError()

    def test_pickle_round_trip(self):
        error = pickle.loads(pickle.dumps(InvalidNationalIdError()))

        assert isinstance(error, InvalidNationalIdError)
        assert error == InvalidNationalIdError()

    def test_message_is_translatable(self):
        """
        Ensure that the message is resolved lazily, so the active language
        applies when it is rendered.
        """

        assert isinstance(InvalidNationalIdError().message, Promise)
