from typing import Iterable, List, Optional

from django.conf import settings

from ..models import Vendor
from .proximity import (
    Coordinate,
    RankedVendor,
    VendorSnapshot,
    coerce_coordinate,
    filter_ranked,
    normalize_tags,
    rank,
)


def default_origin() -> Coordinate:
    latitude, longitude = settings.DEFAULT_SEARCH_ORIGIN
    return Coordinate(float(latitude), float(longitude))


def resolve_origin(latitude, longitude):
    """
    Use the browser-reported position when it parses, otherwise the configured default.
    Returns (origin, used_default).
    """
    origin = coerce_coordinate(latitude, longitude)
    if origin is None:
        return default_origin(), True
    return origin, False


def snapshot_for(vendor: Vendor) -> VendorSnapshot:
    status = vendor.status
    location = status.current_location
    return VendorSnapshot(
        vendor_id=vendor.pk,
        name=vendor.business_name,
        operational_status=status.operational_status,
        cuisine_types=normalize_tags(vendor.cuisine_types),
        latitude=location.latitude if location else None,
        longitude=location.longitude if location else None,
        vendor=vendor,
        location=location,
    )


def load_vendor_snapshots() -> List[VendorSnapshot]:
    """Approved vendors that have a status row, with their current location."""
    vendors = (
        Vendor.objects.filter(is_approved=True, status__isnull=False)
        .select_related("status", "status__current_location")
        .order_by("business_name", "id")
    )
    return [snapshot_for(vendor) for vendor in vendors]


def search_vendors(
    origin: Coordinate,
    live_only: bool = False,
    cuisines: Optional[Iterable[str]] = None,
) -> List[RankedVendor]:
    ranked = rank(origin, load_vendor_snapshots())
    return filter_ranked(ranked, live_only=live_only, cuisines=cuisines or ())
