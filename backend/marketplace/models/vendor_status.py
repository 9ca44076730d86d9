from django.core.exceptions import ValidationError
from django.db import models

from .location import Location
from .vendor import Vendor


class OperationalStatus(models.TextChoices):
    OFFLINE = "offline", "Offline"
    LIVE = "live", "Live & Serving"
    CLOSING_SOON = "closing_soon", "Closing Soon"


# Each status has exactly one legal successor.
TRANSITIONS = {
    OperationalStatus.OFFLINE: OperationalStatus.LIVE,
    OperationalStatus.LIVE: OperationalStatus.CLOSING_SOON,
    OperationalStatus.CLOSING_SOON: OperationalStatus.OFFLINE,
}

if set(TRANSITIONS) != set(OperationalStatus):
    raise RuntimeError("Every operational status needs an entry in TRANSITIONS.")

# Statuses in which a vendor is serving and has a current location. Anything else counts as offline.
SERVING_STATUSES = frozenset({OperationalStatus.LIVE, OperationalStatus.CLOSING_SOON})


def next_status(current):
    return TRANSITIONS[OperationalStatus(current)]


def is_legal_transition(current, requested):
    try:
        return next_status(current) == OperationalStatus(requested)
    except ValueError:
        return False


class VendorStatus(models.Model):
    """
    Operational state of a vendor.
    current_location and went_live_at are set exactly while the vendor is live or closing soon.
    """

    vendor = models.OneToOneField(Vendor, on_delete=models.CASCADE, related_name="status")
    operational_status = models.CharField(
        max_length=20,
        choices=OperationalStatus.choices,
        default=OperationalStatus.OFFLINE,
    )
    went_live_at = models.DateTimeField(null=True, blank=True)
    current_location = models.ForeignKey(
        Location,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "vendor statuses"

    def clean(self) -> None:
        serving = self.is_live
        if serving != (self.current_location_id is not None):
            raise ValidationError(
                {"current_location": "A current location is required exactly while serving."}
            )
        if serving != (self.went_live_at is not None):
            raise ValidationError(
                {"went_live_at": "Went-live time is required exactly while serving."}
            )

    @property
    def is_live(self) -> bool:
        return self.operational_status in SERVING_STATUSES

    def __str__(self) -> str:
        return f"{self.vendor} ({self.get_operational_status_display()})"
