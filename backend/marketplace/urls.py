from django.urls import path

from .views.menu_views import (
    menu_item_create,
    menu_item_delete,
    menu_item_toggle,
    menu_items_table,
    menu_manage,
)
from .views.search_views import search_results, vendor_search
from .views.status_views import dashboard, go_live, location_search, status_advance
from .views.vendor_views import vendor_detail, vendor_onboarding

app_name = "marketplace"

urlpatterns = [
    path("", vendor_search, name="vendor_search"),
    path("search/results/", search_results, name="search_results"),
    path("vendors/<int:pk>/", vendor_detail, name="vendor_detail"),
    path("vendor/onboarding/", vendor_onboarding, name="vendor_onboarding"),
    path("dashboard/", dashboard, name="dashboard"),
    path("dashboard/status/advance/", status_advance, name="status_advance"),
    path("dashboard/status/go-live/", go_live, name="go_live"),
    path("dashboard/location-search/", location_search, name="location_search"),
    path("menu/", menu_manage, name="menu_manage"),
    path("menu/items/", menu_items_table, name="menu_items_table"),
    path("menu/items/create/", menu_item_create, name="menu_item_create"),
    path("menu/items/<int:pk>/toggle/", menu_item_toggle, name="menu_item_toggle"),
    path("menu/items/<int:pk>/delete/", menu_item_delete, name="menu_item_delete"),
]
