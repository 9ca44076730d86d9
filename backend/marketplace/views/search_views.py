from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET

from marketplace.constants import CUISINE_OPTIONS
from marketplace.services.search import resolve_origin, search_vendors


def _search_context(request: HttpRequest) -> dict:
    origin, used_default = resolve_origin(request.GET.get("lat"), request.GET.get("lng"))
    live_only = request.GET.get("live_only") in ("1", "on", "true")
    selected_cuisines = [value for value in request.GET.getlist("cuisine") if value]
    results = search_vendors(origin, live_only=live_only, cuisines=selected_cuisines)
    return {
        "origin": origin,
        "used_default_origin": used_default,
        "live_only": live_only,
        "selected_cuisines": selected_cuisines,
        "cuisine_options": CUISINE_OPTIONS,
        "results": results,
        "result_count": len(results),
    }


@require_GET
def vendor_search(request: HttpRequest) -> HttpResponse:
    return render(request, "marketplace/search/index.html", _search_context(request))


@require_GET
def search_results(request: HttpRequest) -> HttpResponse:
    if not getattr(request, "htmx", False):
        query = request.META.get("QUERY_STRING", "")
        target = reverse("marketplace:vendor_search")
        if query:
            target = f"{target}?{query}"
        return redirect(target)

    return render(request, "marketplace/search/results_partial.html", _search_context(request))
