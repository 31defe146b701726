"""
Initial migration for Orderman models.
"""

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Orderman models: Supplier, Casket, Urn, Order."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Supplier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('ordering_instructions', models.TextField(blank=True, null=True, verbose_name='Ordering instructions')),
                ('phone', models.CharField(blank=True, max_length=50, null=True, verbose_name='Phone')),
                ('email', models.EmailField(blank=True, max_length=254, null=True, verbose_name='Email')),
                ('ordering_website', models.URLField(blank=True, null=True, verbose_name='Ordering website')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Supplier',
                'verbose_name_plural': 'Suppliers',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Casket',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('on_hand', models.IntegerField(default=0, verbose_name='On hand')),
                ('target_qty', models.PositiveIntegerField(default=0, help_text='How many we want on hand. Used for the short-by report.', verbose_name='Target quantity')),
                ('green', models.BooleanField(default=False, verbose_name='Green burial')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('material', models.CharField(blank=True, choices=[('WOOD', 'Wood'), ('METAL', 'Metal'), ('GREEN', 'Green')], max_length=10, null=True, verbose_name='Material')),
                ('jewish', models.BooleanField(default=False, verbose_name='Jewish')),
                ('ext_width_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('ext_length_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('ext_height_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('int_width_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('int_length_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('int_height_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('supplier', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='orderman.supplier', verbose_name='Supplier')),
            ],
            options={
                'verbose_name': 'Casket',
                'verbose_name_plural': 'Caskets',
                'ordering': ['name'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Urn',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('on_hand', models.IntegerField(default=0, verbose_name='On hand')),
                ('target_qty', models.PositiveIntegerField(default=0, help_text='How many we want on hand. Used for the short-by report.', verbose_name='Target quantity')),
                ('green', models.BooleanField(default=False, verbose_name='Green burial')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('category', models.CharField(blank=True, choices=[('FULL', 'Full size'), ('KEEPSAKE', 'Keepsake'), ('JEWELRY', 'Jewelry'), ('SPECIAL', 'Special')], max_length=10, null=True, verbose_name='Category')),
                ('width_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('height_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('depth_in', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('supplier', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='orderman.supplier', verbose_name='Supplier')),
            ],
            options={
                'verbose_name': 'Urn',
                'verbose_name_plural': 'Urns',
                'ordering': ['name'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item_type', models.CharField(choices=[('casket', 'Casket'), ('urn', 'Urn')], max_length=10, verbose_name='Item type')),
                ('item_id', models.PositiveIntegerField(blank=True, null=True, verbose_name='Item ID')),
                ('item_name', models.CharField(blank=True, help_text='Special orders only.', max_length=255, null=True, verbose_name='Item description')),
                ('po_number', models.CharField(max_length=100, verbose_name='PO number')),
                ('expected_date', models.DateField(blank=True, null=True, verbose_name='Expected date')),
                ('status', models.CharField(choices=[('PENDING', 'Pending'), ('BACKORDERED', 'Backordered'), ('SPECIAL', 'Special'), ('ARRIVED', 'Arrived')], db_index=True, default='PENDING', max_length=20, verbose_name='Status')),
                ('backordered', models.BooleanField(default=False, verbose_name='Backordered')),
                ('tbd_expected', models.BooleanField(default=False, verbose_name='Expected date TBD')),
                ('special_order', models.BooleanField(default=False, verbose_name='Special order')),
                ('deceased_name', models.CharField(blank=True, max_length=255, null=True, verbose_name='Deceased')),
                ('need_by_date', models.DateField(blank=True, null=True, verbose_name='Need by')),
                ('notes', models.TextField(blank=True, null=True, verbose_name='Notes')),
                ('is_return', models.BooleanField(default=False, verbose_name='Return')),
                ('return_reason', models.TextField(blank=True, null=True, verbose_name='Return reason')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ('arrived_at', models.DateTimeField(blank=True, null=True, verbose_name='Arrived at')),
                ('received_by', models.CharField(blank=True, max_length=200, null=True, verbose_name='Received by')),
                ('supplier', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to='orderman.supplier', verbose_name='Supplier')),
            ],
            options={
                'verbose_name': 'Order',
                'verbose_name_plural': 'Orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['item_type', 'item_id'], name='orderman_order_item_idx'),
                    models.Index(fields=['status', 'created_at'], name='orderman_order_status_idx'),
                ],
            },
        ),
    ]
