"""
National ID factory for generating test data.

This module uses `factory_boy` to provide a `NationalIdFactory` that builds
valid `NationalId` values. The nine-digit body is random (via `faker`) and
the control digit is computed from it, so every generated value passes
validation.

Example:
    >>> nid = NationalIdFactory()
    >>> len(nid.value)
    10

    >>> NationalIdFactory(body="081465943")
    NationalId('0814659438')
"""

import factory

from .utils import compute_control_digit
from .values import NationalId


class NationalIdFactory(factory.Factory):
    """
    Factory for building `NationalId` instances for tests.

    Meta:
        model (NationalId): The value type being built. `NationalId` is not
            a Django model, so `build` and `create` behave the same.

    Attributes:
        body (str): Nine digits. Defaults to a random string whose first
            digit is non-zero, so the weighted sum is never zero.
    """

    class Meta:
        model = NationalId

    body = factory.Faker("numerify", text="%########")

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Append the control digit to `body` and run it through the constructor."""

        body = kwargs.pop("body")
        return model_class(f"{body}{compute_control_digit(body)}")

    @classmethod
    def _build(cls, model_class, *args, **kwargs):
        return cls._create(model_class, *args, **kwargs)
