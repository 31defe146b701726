"""
Enriched orders view.

Joins each order to its supplier name and item display name:
special orders show item_name, regular orders the catalog row's name.
Plain SQL that runs on PostgreSQL and SQLite.
"""

from django.db import migrations, models

CREATE_VIEW = """
CREATE VIEW orderman_v_orders_enriched AS
SELECT
    o.id,
    o.item_type,
    o.item_id,
    o.item_name,
    o.supplier_id,
    o.po_number,
    o.expected_date,
    o.status,
    o.backordered,
    o.tbd_expected,
    o.special_order,
    o.deceased_name,
    o.need_by_date,
    o.notes,
    o.is_return,
    o.return_reason,
    o.created_at,
    o.arrived_at,
    o.received_by,
    s.name AS supplier_name,
    CASE
        WHEN o.special_order THEN o.item_name
        WHEN o.item_type = 'casket' THEN c.name
        WHEN o.item_type = 'urn' THEN u.name
    END AS item_display_name
FROM orderman_order o
LEFT JOIN orderman_supplier s ON s.id = o.supplier_id
LEFT JOIN orderman_casket c ON o.item_type = 'casket' AND c.id = o.item_id
LEFT JOIN orderman_urn u ON o.item_type = 'urn' AND u.id = o.item_id
"""

DROP_VIEW = "DROP VIEW IF EXISTS orderman_v_orders_enriched"


class Migration(migrations.Migration):

    dependencies = [
        ('orderman', '0001_initial'),
    ]

    operations = [
        migrations.RunSQL(CREATE_VIEW, reverse_sql=DROP_VIEW),
        migrations.CreateModel(
            name='EnrichedOrder',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item_type', models.CharField(choices=[('casket', 'Casket'), ('urn', 'Urn')], max_length=10)),
                ('item_id', models.PositiveIntegerField(null=True)),
                ('item_name', models.CharField(max_length=255, null=True)),
                ('supplier_id', models.BigIntegerField(null=True)),
                ('po_number', models.CharField(max_length=100)),
                ('expected_date', models.DateField(null=True)),
                ('status', models.CharField(choices=[('PENDING', 'Pending'), ('BACKORDERED', 'Backordered'), ('SPECIAL', 'Special'), ('ARRIVED', 'Arrived')], max_length=20)),
                ('backordered', models.BooleanField()),
                ('tbd_expected', models.BooleanField()),
                ('special_order', models.BooleanField()),
                ('deceased_name', models.CharField(max_length=255, null=True)),
                ('need_by_date', models.DateField(null=True)),
                ('notes', models.TextField(null=True)),
                ('is_return', models.BooleanField()),
                ('return_reason', models.TextField(null=True)),
                ('created_at', models.DateTimeField()),
                ('arrived_at', models.DateTimeField(null=True)),
                ('received_by', models.CharField(max_length=200, null=True)),
                ('supplier_name', models.CharField(max_length=200, null=True)),
                ('item_display_name', models.CharField(max_length=255, null=True)),
            ],
            options={
                'db_table': 'orderman_v_orders_enriched',
                'ordering': ['-created_at'],
                'managed': False,
            },
        ),
    ]
