import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import transaction as db_transaction
from django.db.models import Prefetch
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from marketplace.constants import DEFAULT_MENU_NAME
from marketplace.forms import VendorOnboardingForm
from marketplace.models import Menu, MenuItem, Vendor, VendorStatus
from marketplace.views.utils import current_vendor

logger = logging.getLogger(__name__)


@login_required
@require_http_methods(["GET", "POST"])
def vendor_onboarding(request: HttpRequest) -> HttpResponse:
    if current_vendor(request.user) is not None:
        return redirect("marketplace:dashboard")

    if request.method != "POST":
        form = VendorOnboardingForm(initial={"email": request.user.email})
        return render(request, "marketplace/onboarding/form.html", {"form": form})

    form = VendorOnboardingForm(request.POST)
    if not form.is_valid():
        return render(request, "marketplace/onboarding/form.html", {"form": form}, status=400)

    # Vendor, its offline status and an empty menu appear together or not at all.
    with db_transaction.atomic():
        vendor = form.save(commit=False)
        vendor.owner = request.user
        vendor.email = vendor.email or request.user.email
        vendor.save()
        VendorStatus.objects.create(vendor=vendor)
        Menu.objects.create(vendor=vendor, name=DEFAULT_MENU_NAME)

    logger.info("Vendor %s onboarded by user %s", vendor.pk, request.user.pk)
    messages.success(request, "Vendor profile created successfully!")
    return redirect("marketplace:dashboard")


@require_GET
def vendor_detail(request: HttpRequest, pk: int) -> HttpResponse:
    vendor = get_object_or_404(
        Vendor.objects.select_related("status", "status__current_location"), pk=pk
    )
    if not vendor.is_approved and vendor.owner_id != request.user.pk:
        raise Http404("Vendor not found")

    try:
        status = vendor.status
    except VendorStatus.DoesNotExist:
        status = None

    menus = vendor.menus.filter(is_active=True).prefetch_related(
        Prefetch("items", queryset=MenuItem.objects.filter(is_available=True))
    )
    return render(
        request,
        "marketplace/vendors/detail.html",
        {
            "vendor": vendor,
            "status": status,
            "location": status.current_location if status and status.is_live else None,
            "menus": menus,
        },
    )
