"""
Orderman URLs.

Usage in the project's urls.py:
    path("api/", include("orderman.urls")),
"""

from django.urls import path

from orderman import views

app_name = "orderman"

urlpatterns = [
    path("orders/", views.order_collection, name="order-list"),
    path("orders/<int:order_id>/", views.order_detail, name="order-detail"),
    path("orders/<int:order_id>/arrive/", views.order_arrive, name="order-arrive"),
    path("inventory/status/", views.inventory_status, name="inventory-status"),
]
