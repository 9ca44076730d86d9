from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse, HttpResponseBadRequest
from django.shortcuts import get_object_or_404, redirect, render
from django.template.loader import render_to_string
from django.views.decorators.http import require_GET, require_POST

from marketplace.constants import DEFAULT_MENU_NAME
from marketplace.forms import MenuItemForm
from marketplace.models import Menu, MenuItem
from marketplace.views.utils import current_vendor


def _vendor_menu(vendor):
    menu = vendor.menus.order_by("display_order", "id").first()
    if menu is None:
        menu = Menu.objects.create(vendor=vendor, name=DEFAULT_MENU_NAME)
    return menu


def _grouped_items(menu):
    """
    Items grouped by category for display; relies on MenuItem's category ordering.
    """
    groups = []
    for item in menu.items.all():
        label = item.category or "Other"
        if not groups or groups[-1]["category"] != label:
            groups.append({"category": label, "items": []})
        groups[-1]["items"].append(item)
    return groups


def _menu_context(vendor, menu, form=None):
    return {
        "vendor": vendor,
        "menu": menu,
        "form": form or MenuItemForm(),
        "grouped_items": _grouped_items(menu),
    }


@login_required
@require_GET
def menu_manage(request: HttpRequest) -> HttpResponse:
    vendor = current_vendor(request.user)
    if vendor is None:
        return redirect("marketplace:vendor_onboarding")
    return render(request, "marketplace/menu/index.html", _menu_context(vendor, _vendor_menu(vendor)))


@login_required
@require_GET
def menu_items_table(request: HttpRequest) -> HttpResponse:
    vendor = current_vendor(request.user)
    if vendor is None:
        return HttpResponseBadRequest("No vendor profile for this account.")
    html = render_to_string(
        "marketplace/menu/items_partial.html",
        {"grouped_items": _grouped_items(_vendor_menu(vendor))},
        request=request,
    )
    return HttpResponse(html)


@login_required
@require_POST
def menu_item_create(request: HttpRequest) -> HttpResponse:
    vendor = current_vendor(request.user)
    if vendor is None:
        return HttpResponseBadRequest("No vendor profile for this account.")
    menu = _vendor_menu(vendor)

    form = MenuItemForm(request.POST)
    if form.is_valid():
        item = form.save(commit=False)
        item.menu = menu
        item.display_order = menu.items.count()
        item.save()
        messages.success(request, f"Added '{item.name}' to your menu.")
        if request.htmx:
            html = render_to_string(
                "marketplace/menu/item_form.html", {"form": MenuItemForm()}, request=request
            )
            return HttpResponse(html, headers={"HX-Trigger": "menu:refresh"})
        return redirect("marketplace:menu_manage")

    if request.htmx:
        html = render_to_string("marketplace/menu/item_form.html", {"form": form}, request=request)
        return HttpResponseBadRequest(html)

    return render(request, "marketplace/menu/index.html", _menu_context(vendor, menu, form), status=400)


@login_required
@require_POST
def menu_item_toggle(request: HttpRequest, pk: int) -> HttpResponse:
    vendor = current_vendor(request.user)
    item = get_object_or_404(MenuItem, pk=pk, menu__vendor=vendor)
    item.is_available = not item.is_available
    item.save(update_fields=["is_available", "updated_at"])

    if request.htmx:
        html = render_to_string("marketplace/menu/item_row.html", {"item": item}, request=request)
        return HttpResponse(html)
    return redirect("marketplace:menu_manage")


@login_required
@require_POST
def menu_item_delete(request: HttpRequest, pk: int) -> HttpResponse:
    vendor = current_vendor(request.user)
    item = get_object_or_404(MenuItem, pk=pk, menu__vendor=vendor)
    name = item.name
    item.delete()
    messages.info(request, f"Removed '{name}' from your menu.")

    if request.htmx:
        return HttpResponse(status=204, headers={"HX-Trigger": "menu:refresh"})
    return redirect("marketplace:menu_manage")
