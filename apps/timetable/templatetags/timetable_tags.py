from django import template
from django.utils import timezone

register = template.Library()


@register.filter
def get_status_class(status):
    """Get CSS class for lesson status badge"""
    status_classes = {
        'SCHEDULED': 'bg-blue-100 dark:bg-blue-900/30 text-blue-800 dark:text-blue-300',
        'COMPLETED': 'bg-green-100 dark:bg-green-900/30 text-green-800 dark:text-green-300',
        'CANCELLED': 'bg-red-100 dark:bg-red-900/30 text-red-800 dark:text-red-300',
    }
    return status_classes.get(status, 'bg-gray-100 dark:bg-gray-900/30 text-gray-800 dark:text-gray-300')


@register.filter
def block_style(block):
    """Inline position of a lesson block inside its hour cell"""
    return f"top: {block.top_percent:.2f}%; height: {block.height_percent:.2f}%;"


@register.filter
def indicator_style(state):
    """Inline position of the current-time marker inside its hour row"""
    if not state.visible:
        return "display: none;"
    return f"top: {state.offset_percent:.2f}%;"


@register.filter
def local_hm(value):
    """HH:MM of a timestamp in the active time zone"""
    if value is None:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime("%H:%M")


@register.filter
def cell(row, column):
    """Blocks of ``row`` in ``column``"""
    try:
        return row.cells[column]
    except (IndexError, TypeError):
        return []
