from django.contrib import admin

from .models import Location, Menu, MenuItem, Vendor, VendorStatus


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    list_display = ("business_name", "owner", "is_approved", "created_at")
    list_filter = ("is_approved",)
    list_editable = ("is_approved",)
    search_fields = ("business_name", "email", "phone")
    readonly_fields = ("created_at", "updated_at")


@admin.register(VendorStatus)
class VendorStatusAdmin(admin.ModelAdmin):
    list_display = ("vendor", "operational_status", "went_live_at", "current_location", "updated_at")
    list_filter = ("operational_status",)
    search_fields = ("vendor__business_name",)
    # Status changes go through the dashboard so the location rules hold.
    readonly_fields = ("operational_status", "went_live_at", "current_location", "updated_at")


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ("vendor", "address", "city", "state", "latitude", "longitude", "created_at")
    list_filter = ("state",)
    search_fields = ("vendor__business_name", "address", "city")

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ("name", "vendor", "is_active", "display_order")
    list_filter = ("is_active",)
    search_fields = ("name", "vendor__business_name")


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("name", "menu", "category", "price", "is_available")
    list_filter = ("category", "is_available")
    search_fields = ("name", "menu__vendor__business_name")
