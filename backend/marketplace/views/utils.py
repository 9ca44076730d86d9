from marketplace.models import Vendor


def current_vendor(user):
    """
    The vendor profile owned by the signed-in user, or None.
    Status and current location are loaded with it since every vendor page shows them.
    """
    if not user.is_authenticated:
        return None
    return (
        Vendor.objects.select_related("status", "status__current_location")
        .filter(owner=user)
        .first()
    )
