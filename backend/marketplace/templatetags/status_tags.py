from django import template

from marketplace.models import OperationalStatus

register = template.Library()

STATUS_CONFIG = {
    OperationalStatus.OFFLINE: {
        "label": "Offline",
        "search_label": "Offline",
        "dot_class": "bg-gray-400",
        "text_class": "text-gray-700",
        "button_label": "Go Live",
        "button_class": "bg-green-600 hover:bg-green-700",
        "hint": "",
    },
    OperationalStatus.LIVE: {
        "label": "Live & Serving",
        "search_label": "Live Now",
        "dot_class": "bg-green-500 animate-pulse",
        "text_class": "text-green-700",
        "button_label": "Begin Closing Up",
        "button_class": "bg-yellow-600 hover:bg-yellow-700",
        "hint": "Customers can see you! Click when you start wrapping up.",
    },
    OperationalStatus.CLOSING_SOON: {
        "label": "Closing Soon",
        "search_label": "Closing Soon",
        "dot_class": "bg-yellow-500 animate-pulse",
        "text_class": "text-yellow-700",
        "button_label": "Go Offline",
        "button_class": "bg-red-600 hover:bg-red-700",
        "hint": "Let customers know you're closing soon before going offline.",
    },
}


def status_config(operational_status):
    return STATUS_CONFIG.get(operational_status, STATUS_CONFIG[OperationalStatus.OFFLINE])


@register.inclusion_tag("marketplace/components/status_card.html")
def status_card(status):
    """
    Renders the vendor's status card with the button for the next step.
    """
    return {"status": status, "config": status_config(status.operational_status)}


@register.inclusion_tag("marketplace/components/status_badge.html")
def status_badge(operational_status):
    return {"config": status_config(operational_status)}
