from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class NationalIdConfig(AppConfig):
    name = "national_id"
    verbose_name = _("Iranian national ID")
