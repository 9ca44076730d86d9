from django.conf import settings
from django.db import models


class Vendor(models.Model):
    """
    A mobile food business. Only approved vendors appear in customer search.
    """

    owner = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="vendor",
    )
    business_name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    cuisine_types = models.JSONField(default=list, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    email = models.EmailField(blank=True)
    logo_url = models.URLField(blank=True)
    is_approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["business_name"]

    def __str__(self):
        return self.business_name
