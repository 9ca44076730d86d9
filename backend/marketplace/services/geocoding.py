"""
Address search through the Google Geocoding web service.

The provider is built once per process from settings and handed to callers, who check
``is_ready`` before offering manual search.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache

import requests
from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from ..exceptions import NoResult, ProviderUnavailable
from .proximity import coerce_coordinate
from .status_controller import LocationFix

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


@dataclass(frozen=True)
class PlaceResult:
    address: str
    latitude: float
    longitude: float
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def as_location_fix(self) -> LocationFix:
        return LocationFix(
            latitude=self.latitude,
            longitude=self.longitude,
            address=self.address,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            source="search",
        )


def parse_place(result: dict, query: str = "") -> PlaceResult:
    if not isinstance(result, dict):
        raise ProviderUnavailable()
    geometry = result.get("geometry")
    location = geometry.get("location") if isinstance(geometry, dict) else None
    if not isinstance(location, dict) or "lat" not in location or "lng" not in location:
        raise NoResult(query)

    city = state = zip_code = ""
    for component in result.get("address_components") or []:
        types = component.get("types") or []
        if "locality" in types:
            city = component.get("long_name", "")
        if "administrative_area_level_1" in types:
            state = component.get("short_name", "")
        if "postal_code" in types:
            zip_code = component.get("long_name", "")

    coordinate = coerce_coordinate(location["lat"], location["lng"])
    if coordinate is None:
        logger.warning("Geocode returned an unreadable coordinate for %r: %r", query, location)
        raise ProviderUnavailable()

    return PlaceResult(
        address=result.get("formatted_address", ""),
        latitude=coordinate.latitude,
        longitude=coordinate.longitude,
        city=city,
        state=state,
        zip_code=zip_code,
    )


class AddressSearchProvider:
    def __init__(self, api_key: str, timeout: float = 10, country: str = "us", session=None):
        self.api_key = api_key or ""
        self.timeout = timeout
        self.country = (country or "").upper()
        self.session = session or requests.Session()

    @property
    def is_ready(self) -> bool:
        return bool(self.api_key)

    def search(self, query: str) -> PlaceResult:
        """
        Resolve free text to the best matching place.
        Raises NoResult when nothing matches and ProviderUnavailable for every other failure.
        """
        query = (query or "").strip()
        if not query:
            raise NoResult(query)
        if not self.is_ready:
            raise ProviderUnavailable("Location search is not configured.")

        params = {"address": query, "key": self.api_key}
        if self.country:
            params["components"] = f"country:{self.country}"
        try:
            resp = self.session.get(GEOCODE_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            logger.warning("Geocode request failed for %r: %s", query, exc)
            raise ProviderUnavailable() from exc
        except ValueError as exc:
            logger.warning("Geocode returned a non-JSON body for %r", query)
            raise ProviderUnavailable() from exc

        if not isinstance(data, dict):
            logger.warning("Geocode returned an unexpected body for %r", query)
            raise ProviderUnavailable()

        status = data.get("status")
        if status == "ZERO_RESULTS":
            raise NoResult(query)
        if status != "OK":
            logger.warning(
                "Geocode failed for %r: status=%s msg=%s", query, status, data.get("error_message")
            )
            raise ProviderUnavailable()

        results = data.get("results") or []
        if not results:
            raise NoResult(query)
        return parse_place(results[0], query)


@lru_cache(maxsize=None)
def get_address_search_provider() -> AddressSearchProvider:
    return AddressSearchProvider(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        timeout=settings.GEOCODER_TIMEOUT,
        country=settings.GEOCODER_COUNTRY,
    )


@receiver(setting_changed)
def _reset_address_search_provider(setting, **kwargs):
    if setting in {"GOOGLE_MAPS_API_KEY", "GEOCODER_TIMEOUT", "GEOCODER_COUNTRY"}:
        get_address_search_provider.cache_clear()
