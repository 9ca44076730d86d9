import json

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse, HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from marketplace.exceptions import (
    AddressSearchError,
    InvalidTransition,
    LocationUnavailable,
    PersistenceError,
)
from marketplace.forms import GoLiveForm
from marketplace.models import OperationalStatus
from marketplace.services.geocoding import get_address_search_provider
from marketplace.services.status_controller import StatusController
from marketplace.views.utils import current_vendor

STATUS_MESSAGES = {
    OperationalStatus.LIVE: "You are now live!",
    OperationalStatus.CLOSING_SOON: "Status updated to Closing Soon.",
    OperationalStatus.OFFLINE: "You are now offline. See you next time!",
}


def _render_panel(
    request,
    vendor,
    status,
    form=None,
    show_location_form=False,
    use_manual=False,
    status_code=200,
):
    """
    Status card or go-live form. htmx requests get just the panel, others the whole dashboard.
    """
    context = {
        "vendor": vendor,
        "status": status,
        "go_live_form": form or GoLiveForm(),
        "show_location_form": show_location_form,
        "use_manual": use_manual,
        "search_ready": get_address_search_provider().is_ready,
    }
    template = (
        "marketplace/dashboard/status_panel.html"
        if getattr(request, "htmx", False)
        else "marketplace/dashboard/index.html"
    )
    return render(request, template, context, status=status_code)


def _status_changed(request, vendor, status):
    messages.success(request, STATUS_MESSAGES[status.operational_status])
    if getattr(request, "htmx", False):
        response = _render_panel(request, vendor, status)
        response["HX-Trigger"] = json.dumps({"status:changed": status.operational_status})
        return response
    return redirect("marketplace:dashboard")


def _persistence_failed(request, vendor, controller, exc, **panel_kwargs):
    messages.error(request, str(exc))
    if not getattr(request, "htmx", False):
        return redirect("marketplace:dashboard")
    try:
        status = controller.current_status()
    except PersistenceError:
        # No status to draw the panel from; the message alone goes back.
        return HttpResponse(str(exc), status=503)
    return _render_panel(request, vendor, status, status_code=503, **panel_kwargs)


@login_required
@require_GET
def dashboard(request: HttpRequest) -> HttpResponse:
    vendor = current_vendor(request.user)
    if vendor is None:
        return redirect("marketplace:vendor_onboarding")
    try:
        status = StatusController(vendor).current_status()
    except PersistenceError as exc:
        return HttpResponse(str(exc), status=503)
    return _render_panel(request, vendor, status)


@login_required
@require_POST
def status_advance(request: HttpRequest) -> HttpResponse:
    vendor = current_vendor(request.user)
    if vendor is None:
        return HttpResponseBadRequest("No vendor profile for this account.")

    controller = StatusController(vendor)
    try:
        status = controller.current_status()
        if status.operational_status == OperationalStatus.OFFLINE:
            # Going live needs a location first.
            return _render_panel(request, vendor, status, show_location_form=True)
        status = controller.advance()
    except InvalidTransition as exc:
        return HttpResponse(str(exc), status=409)
    except PersistenceError as exc:
        return _persistence_failed(request, vendor, controller, exc)
    return _status_changed(request, vendor, status)


@login_required
@require_POST
def go_live(request: HttpRequest) -> HttpResponse:
    vendor = current_vendor(request.user)
    if vendor is None:
        return HttpResponseBadRequest("No vendor profile for this account.")

    controller = StatusController(vendor)
    form = GoLiveForm(request.POST)
    try:
        if not form.is_valid():
            return _render_panel(
                request,
                vendor,
                controller.current_status(),
                form=form,
                show_location_form=True,
                status_code=400,
            )
        try:
            status = controller.go_live(
                sensor_fix=form.sensor_fix(),
                selected_location=form.selected_location(),
                notes=form.cleaned_data["notes"],
            )
        except LocationUnavailable as exc:
            messages.warning(request, str(exc))
            return _render_panel(
                request,
                vendor,
                controller.current_status(),
                form=form,
                show_location_form=True,
                use_manual=True,
            )
    except InvalidTransition as exc:
        return HttpResponse(str(exc), status=409)
    except PersistenceError as exc:
        return _persistence_failed(
            request, vendor, controller, exc, form=form, show_location_form=True
        )
    return _status_changed(request, vendor, status)


@login_required
@require_POST
def location_search(request: HttpRequest) -> HttpResponse:
    if current_vendor(request.user) is None:
        return HttpResponseBadRequest("No vendor profile for this account.")

    query = (request.POST.get("q") or "").strip()
    context = {"query": query, "place": None, "search_error": ""}
    provider = get_address_search_provider()
    if not provider.is_ready:
        context["search_error"] = "Location search is unavailable. Please use your GPS location."
        return render(request, "marketplace/dashboard/place_partial.html", context)

    try:
        context["place"] = provider.search(query)
    except AddressSearchError as exc:
        # Inline message; the user can edit the query and retry.
        context["search_error"] = str(exc)
    return render(request, "marketplace/dashboard/place_partial.html", context)
