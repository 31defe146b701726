"""Django app configuration for Orderman."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class OrdermanConfig(AppConfig):
    """Configuration for Orderman app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "orderman"
    verbose_name = _("Orders & Inventory")
