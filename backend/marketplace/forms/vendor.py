from django import forms

from marketplace.constants import CUISINE_OPTIONS
from marketplace.models import Vendor

INPUT_CLASS = "block w-full rounded-md border border-gray-300 px-3 py-2"


class VendorOnboardingForm(forms.ModelForm):
    cuisine_types = forms.MultipleChoiceField(
        choices=[(value, value) for value in CUISINE_OPTIONS],
        widget=forms.CheckboxSelectMultiple,
        error_messages={"required": "Please select at least one cuisine type."},
    )

    class Meta:
        model = Vendor
        fields = ["business_name", "description", "cuisine_types", "phone", "email"]
        widgets = {
            "business_name": forms.TextInput(
                attrs={"class": INPUT_CLASS, "placeholder": "Your truck's name", "required": True}
            ),
            "description": forms.Textarea(attrs={"class": INPUT_CLASS, "rows": 3}),
            "phone": forms.TextInput(attrs={"class": INPUT_CLASS, "type": "tel"}),
            "email": forms.EmailInput(attrs={"class": INPUT_CLASS}),
        }

    def clean_business_name(self):
        name = self.cleaned_data["business_name"].strip()
        if not name:
            raise forms.ValidationError("Business name is required.")
        return name
