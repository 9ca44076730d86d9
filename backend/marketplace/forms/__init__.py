from .go_live import GoLiveForm
from .menu_item import MenuItemForm
from .vendor import VendorOnboardingForm

__all__ = ["GoLiveForm", "MenuItemForm", "VendorOnboardingForm"]
