"""
Distance ranking for customer search.

Everything here is pure: no queries, no logging, and no exceptions for bad records.
A vendor whose coordinate cannot be read simply has no distance.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..models.vendor_status import SERVING_STATUSES

EARTH_RADIUS_MILES = 3959


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


def coerce_coordinate(latitude: Any, longitude: Any) -> Optional[Coordinate]:
    """
    Build a Coordinate from loosely typed input (floats, form strings, None).
    Returns None for anything that is not a finite WGS84 pair.
    """
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        return None
    return Coordinate(lat, lon)


def haversine_miles(origin: Coordinate, target: Coordinate) -> float:
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lat = math.radians(target.latitude - origin.latitude)
    d_lon = math.radians(target.longitude - origin.longitude)
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # Rounding can push a a hair above 1 for antipodal points.
    a = min(1.0, a)
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def normalize_tags(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    try:
        return tuple(str(tag) for tag in value if tag)
    except TypeError:
        return ()


@dataclass(frozen=True)
class VendorSnapshot:
    vendor_id: Any
    name: str
    operational_status: str
    cuisine_types: Tuple[str, ...] = ()
    latitude: Any = None
    longitude: Any = None
    # Display objects carried through for templates; never used for ordering.
    vendor: Any = field(default=None, compare=False, repr=False)
    location: Any = field(default=None, compare=False, repr=False)

    @property
    def is_live(self) -> bool:
        return self.operational_status in SERVING_STATUSES

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.latitude is None or self.longitude is None:
            return None
        return coerce_coordinate(self.latitude, self.longitude)


@dataclass(frozen=True)
class RankedVendor:
    snapshot: VendorSnapshot
    distance_miles: Optional[float] = None

    @property
    def is_live(self) -> bool:
        return self.snapshot.is_live

    @property
    def vendor_id(self):
        return self.snapshot.vendor_id


def _rank_key(item: RankedVendor):
    return (
        not item.is_live,
        item.distance_miles is None,
        item.distance_miles if item.distance_miles is not None else 0.0,
    )


def rank(origin: Coordinate, candidates: Iterable[VendorSnapshot]) -> List[RankedVendor]:
    """
    Annotate each candidate with its distance from origin and order them:
    serving vendors first, then nearest first, vendors without a distance last in their group.
    The sort is stable, so ties keep the input order.
    """
    ranked = []
    for snapshot in candidates:
        coordinate = snapshot.coordinate
        distance = haversine_miles(origin, coordinate) if coordinate is not None else None
        ranked.append(RankedVendor(snapshot=snapshot, distance_miles=distance))
    ranked.sort(key=_rank_key)
    return ranked


def filter_ranked(
    ranked: Sequence[RankedVendor],
    live_only: bool = False,
    cuisines: Iterable[str] = (),
) -> List[RankedVendor]:
    """
    Narrow a ranked list without touching order or distances.
    An empty cuisine selection keeps every vendor.
    """
    selected = {value for value in cuisines or () if value}
    results = []
    for item in ranked:
        if live_only and not item.is_live:
            continue
        if selected and not selected.intersection(item.snapshot.cuisine_types):
            continue
        results.append(item)
    return results
