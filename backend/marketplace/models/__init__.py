from .vendor import Vendor
from .location import Location
from .vendor_status import OperationalStatus, VendorStatus
from .menu import Menu
from .menu_item import MenuItem

__all__ = [
    "Vendor",
    "Location",
    "OperationalStatus",
    "VendorStatus",
    "Menu",
    "MenuItem",
]
