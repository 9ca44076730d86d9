from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from marketplace.models import Menu, MenuItem
from marketplace.tests.helpers import make_vendor


class MenuViewTests(TestCase):
    def setUp(self):
        self.vendor = make_vendor("tacos")
        self.menu = Menu.objects.create(vendor=self.vendor, name="Main Menu")
        self.client.login(username="tacos", password="password")

    def add_item(self, **fields):
        fields.setdefault("name", "Carnitas Taco")
        fields.setdefault("price", Decimal("3.50"))
        return MenuItem.objects.create(menu=self.menu, **fields)

    def test_manage_page_groups_by_category(self):
        self.add_item(name="Churros", price=Decimal("4.00"), category="Desserts")
        self.add_item(name="Horchata", price=Decimal("2.50"))
        response = self.client.get(reverse("marketplace:menu_manage"))

        self.assertEqual(response.status_code, 200)
        labels = [group["category"] for group in response.context["grouped_items"]]
        self.assertEqual(sorted(labels), ["Desserts", "Other"])
        self.assertContains(response, "Churros")

    def test_create_item(self):
        response = self.client.post(
            reverse("marketplace:menu_item_create"),
            {
                "name": " Al Pastor ",
                "price": "4.25",
                "category": "Entrees",
                "dietary_tags": ["Spicy", "Gluten-Free"],
            },
            HTTP_HX_REQUEST="true",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["HX-Trigger"], "menu:refresh")
        item = MenuItem.objects.get(menu=self.menu)
        self.assertEqual(item.name, "Al Pastor")
        self.assertEqual(item.price, Decimal("4.25"))
        self.assertEqual(item.dietary_tags, ["Spicy", "Gluten-Free"])
        self.assertTrue(item.is_available)

    def test_negative_price_is_rejected(self):
        response = self.client.post(
            reverse("marketplace:menu_item_create"),
            {"name": "Free Money", "price": "-1"},
            HTTP_HX_REQUEST="true",
        )
        self.assertEqual(response.status_code, 400)
        self.assertFalse(MenuItem.objects.exists())

    def test_invalid_plain_post_rerenders_page(self):
        response = self.client.post(reverse("marketplace:menu_item_create"), {"name": "", "price": "2"})
        self.assertEqual(response.status_code, 400)
        self.assertTemplateUsed(response, "marketplace/menu/index.html")

    def test_toggle_availability(self):
        item = self.add_item()
        response = self.client.post(
            reverse("marketplace:menu_item_toggle", args=[item.pk]), HTTP_HX_REQUEST="true"
        )
        self.assertContains(response, "Unavailable")
        item.refresh_from_db()
        self.assertFalse(item.is_available)

    def test_delete_item(self):
        item = self.add_item()
        response = self.client.post(
            reverse("marketplace:menu_item_delete", args=[item.pk]), HTTP_HX_REQUEST="true"
        )
        self.assertEqual(response.status_code, 204)
        self.assertEqual(response["HX-Trigger"], "menu:refresh")
        self.assertFalse(MenuItem.objects.filter(pk=item.pk).exists())

    def test_cannot_touch_another_vendors_items(self):
        other = make_vendor("pizza")
        other_menu = Menu.objects.create(vendor=other, name="Main Menu")
        item = MenuItem.objects.create(menu=other_menu, name="Slice", price=Decimal("3.00"))

        toggle = self.client.post(reverse("marketplace:menu_item_toggle", args=[item.pk]))
        delete = self.client.post(reverse("marketplace:menu_item_delete", args=[item.pk]))

        self.assertEqual(toggle.status_code, 404)
        self.assertEqual(delete.status_code, 404)
        self.assertTrue(MenuItem.objects.filter(pk=item.pk, is_available=True).exists())
