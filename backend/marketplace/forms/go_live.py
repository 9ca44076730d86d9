from django import forms

from marketplace.services.proximity import coerce_coordinate
from marketplace.services.status_controller import LocationFix


class GoLiveForm(forms.Form):
    """
    Carries the browser's GPS reading and/or the place picked from address search.
    Coordinates are plain text so a garbled reading counts as "no reading" rather than a form error.
    """

    gps_latitude = forms.CharField(required=False, widget=forms.HiddenInput)
    gps_longitude = forms.CharField(required=False, widget=forms.HiddenInput)
    place_address = forms.CharField(required=False, widget=forms.HiddenInput)
    place_latitude = forms.CharField(required=False, widget=forms.HiddenInput)
    place_longitude = forms.CharField(required=False, widget=forms.HiddenInput)
    place_city = forms.CharField(required=False, widget=forms.HiddenInput)
    place_state = forms.CharField(required=False, widget=forms.HiddenInput)
    place_zip = forms.CharField(required=False, widget=forms.HiddenInput)
    notes = forms.CharField(
        required=False,
        max_length=255,
        widget=forms.TextInput(
            attrs={
                "class": "block w-full rounded-md border border-gray-300 px-3 py-2",
                "placeholder": "e.g., Behind City Hall, Next to the park",
            }
        ),
    )

    def clean_notes(self):
        return (self.cleaned_data.get("notes") or "").strip()

    def sensor_fix(self):
        data = self.cleaned_data
        coordinate = coerce_coordinate(data.get("gps_latitude"), data.get("gps_longitude"))
        if coordinate is None:
            return None
        return LocationFix(coordinate.latitude, coordinate.longitude, source="gps")

    def selected_location(self):
        data = self.cleaned_data
        coordinate = coerce_coordinate(data.get("place_latitude"), data.get("place_longitude"))
        if coordinate is None:
            return None
        return LocationFix(
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            address=(data.get("place_address") or "").strip(),
            city=(data.get("place_city") or "").strip(),
            state=(data.get("place_state") or "").strip(),
            zip_code=(data.get("place_zip") or "").strip(),
            source="search",
        )
