from django.db import models

from .vendor import Vendor


class Location(models.Model):
    """
    Where a vendor served from. A new row is written every time the vendor goes live;
    rows are history and are never edited afterwards.
    """

    vendor = models.ForeignKey(Vendor, on_delete=models.CASCADE, related_name="locations")
    latitude = models.FloatField()
    longitude = models.FloatField()
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=32, blank=True)
    zip_code = models.CharField(max_length=16, blank=True)
    notes = models.CharField(max_length=255, blank=True)
    is_current_location = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.address or f"{self.latitude:.6f}, {self.longitude:.6f}"
