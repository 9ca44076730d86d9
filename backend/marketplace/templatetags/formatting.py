from decimal import Decimal, InvalidOperation

from django import template

register = template.Library()


@register.filter
def currency(value):
    """
    Format a menu price with thousands separators.
    """
    if value is None:
        return "$0.00"
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return "$0.00"
    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    return f"{sign}${amount:,.2f}"


@register.filter
def miles_away(value):
    if value is None:
        return ""
    try:
        distance = float(value)
    except (TypeError, ValueError):
        return ""
    return f"{distance:.1f} miles away"


@register.filter
def coordinate(value):
    try:
        return f"{float(value):.4f}"
    except (TypeError, ValueError):
        return ""
