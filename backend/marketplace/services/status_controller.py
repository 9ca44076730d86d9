"""
Operational status transitions for a single vendor.

offline -> live -> closing_soon -> offline is the only cycle. Going live writes a new
Location row and points the status at it inside one database transaction, location first.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from ..exceptions import InvalidTransition, LocationUnavailable, PersistenceError
from ..models import Location, OperationalStatus, VendorStatus
from ..models.vendor_status import is_legal_transition, next_status
from .proximity import coerce_coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationFix:
    latitude: float
    longitude: float
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    source: str = "gps"


def choose_location(
    sensor_fix: Optional[LocationFix] = None,
    selected_location: Optional[LocationFix] = None,
) -> LocationFix:
    """Prefer the device reading; fall back to the place picked from address search."""
    for fix in (sensor_fix, selected_location):
        if fix is not None and coerce_coordinate(fix.latitude, fix.longitude) is not None:
            return fix
    raise LocationUnavailable()


class StatusController:
    def __init__(self, vendor):
        self.vendor = vendor

    def current_status(self) -> VendorStatus:
        """The stored status; a vendor without one starts offline."""
        try:
            status, created = VendorStatus.objects.select_related("current_location").get_or_create(
                vendor=self.vendor
            )
        except DatabaseError as exc:
            logger.exception("Could not load status for vendor %s", self.vendor.pk)
            raise PersistenceError("Could not load your current status. Please try again.") from exc
        if created:
            logger.info("Created missing offline status for vendor %s", self.vendor.pk)
        return status

    def transition(self, requested, **kwargs) -> VendorStatus:
        try:
            requested = OperationalStatus(requested)
        except ValueError:
            current = self.current_status().operational_status
            raise InvalidTransition(current, requested) from None
        handlers = {
            OperationalStatus.LIVE: self.go_live,
            OperationalStatus.CLOSING_SOON: self.begin_closing,
            OperationalStatus.OFFLINE: self.go_offline,
        }
        return handlers[requested](**kwargs)

    def advance(self, **kwargs) -> VendorStatus:
        current = self.current_status().operational_status
        return self.transition(next_status(current), **kwargs)

    def go_live(
        self,
        sensor_fix: Optional[LocationFix] = None,
        selected_location: Optional[LocationFix] = None,
        notes: str = "",
    ) -> VendorStatus:
        status = self.current_status()
        self._ensure_legal(status, OperationalStatus.LIVE)
        fix = choose_location(sensor_fix, selected_location)
        coordinate = coerce_coordinate(fix.latitude, fix.longitude)

        try:
            with transaction.atomic():
                location = Location.objects.create(
                    vendor=self.vendor,
                    latitude=coordinate.latitude,
                    longitude=coordinate.longitude,
                    address=fix.address or "",
                    city=fix.city or "",
                    state=fix.state or "",
                    zip_code=fix.zip_code or "",
                    notes=(notes or "").strip(),
                    is_current_location=True,
                )
                self._apply(
                    status,
                    OperationalStatus.LIVE,
                    went_live_at=timezone.now(),
                    current_location=location,
                )
        except DatabaseError as exc:
            logger.exception("Go live failed for vendor %s", self.vendor.pk)
            raise PersistenceError("Failed to go live. Please try again.") from exc

        logger.info(
            "Vendor %s is live at location %s (%s)", self.vendor.pk, location.pk, fix.source
        )
        return self._reload(status)

    def begin_closing(self) -> VendorStatus:
        status = self.current_status()
        self._ensure_legal(status, OperationalStatus.CLOSING_SOON)
        try:
            with transaction.atomic():
                self._apply(status, OperationalStatus.CLOSING_SOON)
        except DatabaseError as exc:
            logger.exception("Closing-soon update failed for vendor %s", self.vendor.pk)
            raise PersistenceError("Failed to update status. Please try again.") from exc

        logger.info("Vendor %s is closing soon", self.vendor.pk)
        return self._reload(status)

    def go_offline(self) -> VendorStatus:
        status = self.current_status()
        self._ensure_legal(status, OperationalStatus.OFFLINE)
        try:
            with transaction.atomic():
                self._apply(
                    status,
                    OperationalStatus.OFFLINE,
                    went_live_at=None,
                    current_location=None,
                )
        except DatabaseError as exc:
            logger.exception("Go offline failed for vendor %s", self.vendor.pk)
            raise PersistenceError("Failed to update status. Please try again.") from exc

        logger.info("Vendor %s is offline", self.vendor.pk)
        return self._reload(status)

    def _ensure_legal(self, status: VendorStatus, requested) -> None:
        if not is_legal_transition(status.operational_status, requested):
            raise InvalidTransition(status.operational_status, requested)

    def _apply(self, status: VendorStatus, requested, **changes) -> None:
        # Conditional on the status we validated against; a concurrent change makes this a no-op.
        updated = VendorStatus.objects.filter(
            pk=status.pk,
            operational_status=status.operational_status,
        ).update(operational_status=requested, updated_at=timezone.now(), **changes)
        if updated != 1:
            current = (
                VendorStatus.objects.filter(pk=status.pk)
                .values_list("operational_status", flat=True)
                .first()
            )
            raise InvalidTransition(current, requested)

        status.operational_status = requested
        for name, value in changes.items():
            setattr(status, name, value)

    def _reload(self, status: VendorStatus) -> VendorStatus:
        # The transition is committed at this point; fall back to the values just written.
        try:
            status.refresh_from_db()
        except DatabaseError:
            logger.warning("Could not reload status for vendor %s", self.vendor.pk, exc_info=True)
        return status
