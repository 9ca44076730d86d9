from django.db import models

from .vendor import Vendor


class Menu(models.Model):
    vendor = models.ForeignKey(Vendor, on_delete=models.CASCADE, related_name="menus")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    display_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_order", "id"]

    def __str__(self):
        return f"{self.vendor} - {self.name}"
