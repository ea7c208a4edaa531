"""
Validation and normalization of Iranian national IDs (کد ملی).

Add ``"national_id"`` to ``INSTALLED_APPS`` and build values with
``national_id.values.NationalId``, or use the form and serializer fields
in ``national_id.forms`` and ``national_id.serializers``.
"""

__version__ = "0.1.0"
