from django import forms

from marketplace.constants import DIETARY_TAG_OPTIONS
from marketplace.models import MenuItem

INPUT_CLASS = "block w-full rounded-md border border-gray-300 px-3 py-2"


class MenuItemForm(forms.ModelForm):
    dietary_tags = forms.MultipleChoiceField(
        choices=[(value, value) for value in DIETARY_TAG_OPTIONS],
        widget=forms.CheckboxSelectMultiple,
        required=False,
    )

    class Meta:
        model = MenuItem
        fields = ["name", "description", "price", "category", "dietary_tags"]
        widgets = {
            "name": forms.TextInput(attrs={"class": INPUT_CLASS, "required": True}),
            "description": forms.Textarea(attrs={"class": INPUT_CLASS, "rows": 2}),
            "price": forms.NumberInput(attrs={"class": INPUT_CLASS, "min": 0, "step": "0.01"}),
            "category": forms.Select(attrs={"class": INPUT_CLASS}),
        }

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError("Item name is required.")
        return name
