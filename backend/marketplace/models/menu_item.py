from django.core.validators import MinValueValidator
from django.db import models

from ..constants import MENU_CATEGORY_OPTIONS
from .menu import Menu


class MenuItem(models.Model):
    CATEGORY_CHOICES = [(value, value) for value in MENU_CATEGORY_OPTIONS]

    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name="items")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, blank=True)
    dietary_tags = models.JSONField(default=list, blank=True)
    image_url = models.URLField(blank=True)
    is_available = models.BooleanField(default=True)
    display_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["category", "display_order", "id"]

    def __str__(self):
        return self.name
