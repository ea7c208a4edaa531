import logging

from django import forms

from .exceptions import InvalidNationalIdError
from .utils import is_valid_national_id, normalize_national_id
from .values import NationalId

logger = logging.getLogger(__name__)


class NationalIdField(forms.CharField):
    """
    Form field that cleans user input into a `NationalId`.

    Empty input cleans to ``None`` (pair with ``required=False`` to allow
    blanks). Anything else is validated and zero-padded, e.g.
    ``" 814659438"`` cleans to ``NationalId('0814659438')``.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("strip", True)
        super().__init__(**kwargs)

    def to_python(self, value):
        value = super().to_python(value)
        if value in self.empty_values:
            return None

        try:
            return NationalId(value)
        except InvalidNationalIdError as exc:
            logger.debug("Rejected national ID input of length %d", len(value))
            raise forms.ValidationError(exc.message, code=exc.code) from exc

    def prepare_value(self, value):
        if isinstance(value, NationalId):
            return value.value
        return super().prepare_value(value)

    def has_changed(self, initial, data):
        """
        Compare canonical forms, so a stored ``"814659438"`` and a submitted
        ``"0814659438"`` count as unchanged.
        """

        if self.disabled:
            return False

        try:
            data_value = self.to_python(data)
        except forms.ValidationError:
            return True

        initial_value = self.prepare_value(initial)
        if initial_value in self.empty_values:
            initial_value = ""
        elif is_valid_national_id(initial_value):
            initial_value = normalize_national_id(initial_value)

        return initial_value != ("" if data_value is None else data_value.value)
