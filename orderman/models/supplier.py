"""
Supplier model — who ships the merchandise.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Supplier(models.Model):
    """
    Supplier of caskets and urns.

    Referenced by items and orders, never changed by the order lifecycle.
    """

    name = models.CharField(max_length=200, verbose_name=_('Name'))
    ordering_instructions = models.TextField(
        blank=True,
        null=True,
        verbose_name=_('Ordering instructions'),
    )
    phone = models.CharField(max_length=50, blank=True, null=True, verbose_name=_('Phone'))
    email = models.EmailField(blank=True, null=True, verbose_name=_('Email'))
    ordering_website = models.URLField(blank=True, null=True, verbose_name=_('Ordering website'))

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _('Supplier')
        verbose_name_plural = _('Suppliers')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name
