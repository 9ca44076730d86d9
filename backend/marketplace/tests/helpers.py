from django.contrib.auth import get_user_model
from django.utils import timezone

from marketplace.models import Location, OperationalStatus, Vendor, VendorStatus


def make_vendor(username="truck", approved=True, cuisine_types=None, **fields):
    user = get_user_model().objects.create_user(
        username=username, password="password", email=f"{username}@example.com"
    )
    vendor = Vendor.objects.create(
        owner=user,
        business_name=fields.pop("business_name", username.title()),
        cuisine_types=cuisine_types if cuisine_types is not None else ["American"],
        is_approved=approved,
        **fields,
    )
    VendorStatus.objects.create(vendor=vendor)
    return vendor


def put_live(vendor, latitude, longitude, status=OperationalStatus.LIVE, **location_fields):
    location = Location.objects.create(
        vendor=vendor,
        latitude=latitude,
        longitude=longitude,
        is_current_location=True,
        **location_fields,
    )
    VendorStatus.objects.filter(vendor=vendor).update(
        operational_status=status,
        went_live_at=timezone.now(),
        current_location=location,
    )
    return location
