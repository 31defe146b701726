"""
Enums for Orderman models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ItemType(models.TextChoices):
    """Kind of merchandise an order replenishes."""
    CASKET = 'casket', _('Casket')
    URN = 'urn', _('Urn')


class OrderStatus(models.TextChoices):
    """
    Order lifecycle status.

    PENDING, BACKORDERED and SPECIAL are derived from the order's fields
    (see orderman.states). ARRIVED is terminal and only set by arrive().
    """
    PENDING = 'PENDING', _('Pending')
    BACKORDERED = 'BACKORDERED', _('Backordered')
    SPECIAL = 'SPECIAL', _('Special')
    ARRIVED = 'ARRIVED', _('Arrived')


class CasketMaterial(models.TextChoices):
    WOOD = 'WOOD', _('Wood')
    METAL = 'METAL', _('Metal')
    GREEN = 'GREEN', _('Green')


class UrnCategory(models.TextChoices):
    FULL = 'FULL', _('Full size')
    KEEPSAKE = 'KEEPSAKE', _('Keepsake')
    JEWELRY = 'JEWELRY', _('Jewelry')
    SPECIAL = 'SPECIAL', _('Special')
