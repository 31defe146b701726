"""
Management command to print stock status per item.

Usage:
    python manage.py inventory_status
    python manage.py inventory_status --short-only
    python manage.py inventory_status --type urn
"""

from django.core.management.base import BaseCommand

from orderman import orders
from orderman.models import ItemType


class Command(BaseCommand):
    """Inventory status report command."""

    help = 'Shows on hand, on order, backorders and shortfall per item'

    def add_arguments(self, parser):
        parser.add_argument(
            '--short-only',
            action='store_true',
            help='Only items below their target quantity'
        )
        parser.add_argument(
            '--type',
            choices=ItemType.values,
            help='Only caskets or only urns'
        )

    def handle(self, *args, **options):
        rows = orders.inventory_status(
            item_type=options['type'],
            short_only=options['short_only'],
        )

        if not rows:
            if orders.has_items(item_type=options['type']):
                self.stdout.write(self.style.SUCCESS('Every item is at target'))
            else:
                self.stdout.write(self.style.WARNING('No items in the catalog'))
            return

        for row in rows:
            line = (
                f'{row.item_type:<7} {row.name:<40} '
                f'on hand {row.on_hand:>3}  on order {row.on_order:>3}  '
                f'backordered {row.backordered:>3}  target {row.target_qty:>3}'
            )
            if row.is_full:
                self.stdout.write(f'{line}  full')
            else:
                self.stdout.write(self.style.WARNING(f'{line}  short by {row.short_by}'))
