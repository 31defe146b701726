"""
Item models — the two stock catalogs (caskets and urns).
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from orderman.models.enums import CasketMaterial, UrnCategory


class StockItem(models.Model):
    """
    Shared shape of a stocked item.

    on_hand is a counter: lifecycle-driven changes go through
    InventoryCounter (atomic F() updates), never through save().
    Direct edits in the admin are administrative corrections.
    """

    name = models.CharField(max_length=200, verbose_name=_('Name'))
    supplier = models.ForeignKey(
        'orderman.Supplier',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name=_('Supplier'),
    )
    on_hand = models.IntegerField(
        default=0,
        verbose_name=_('On hand'),
    )
    target_qty = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Target quantity'),
        help_text=_('How many we want on hand. Used for the short-by report.'),
    )
    green = models.BooleanField(default=False, verbose_name=_('Green burial'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class Casket(StockItem):
    """Casket catalog entry."""

    material = models.CharField(
        max_length=10,
        choices=CasketMaterial.choices,
        blank=True,
        null=True,
        verbose_name=_('Material'),
    )
    jewish = models.BooleanField(default=False, verbose_name=_('Jewish'))

    ext_width_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    ext_length_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    ext_height_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    int_width_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    int_length_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    int_height_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)

    class Meta(StockItem.Meta):
        verbose_name = _('Casket')
        verbose_name_plural = _('Caskets')


class Urn(StockItem):
    """Urn catalog entry."""

    category = models.CharField(
        max_length=10,
        choices=UrnCategory.choices,
        blank=True,
        null=True,
        verbose_name=_('Category'),
    )

    width_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    height_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    depth_in = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)

    class Meta(StockItem.Meta):
        verbose_name = _('Urn')
        verbose_name_plural = _('Urns')
