from django import template
from django.urls import reverse, NoReverseMatch

register = template.Library()


@register.inclusion_tag('corecode/navigation/nav.html', takes_context=True)
def timetable_navigation(context):
    """Navigation menu for the current user's role - Only includes existing URLs"""
    request = context.get('request')
    role = get_user_role(context)

    nav_items = []
    if role == 'teacher':
        nav_items.append({
            'title': 'My Schedule',
            'url': 'timetable:my_schedule',
            'icon': 'fas fa-calendar-week',
        })
    if role == 'admin':
        nav_items.extend([
            {
                'title': 'Lessons',
                'url': 'timetable:lesson_list',
                'icon': 'fas fa-chalkboard',
            },
            {
                'title': 'Schedule Lesson',
                'url': 'timetable:lesson_create',
                'icon': 'fas fa-plus',
            },
        ])
        semester = getattr(request, 'current_semester', None)
        if semester is not None:
            nav_items.append({
                'title': f'{semester.name} Calendar',
                'url': 'timetable:semester_calendar',
                'args': [semester.pk],
                'icon': 'fas fa-calendar-alt',
            })
        nav_items.append({
            'title': 'Administration',
            'url': 'admin:index',
            'icon': 'fas fa-cog',
        })

    filtered_nav = []
    for item in nav_items:
        href = _resolve(item['url'], item.get('args'))
        if href is not None:
            filtered_nav.append(dict(item, href=href))

    return {'nav_items': filtered_nav, 'request': request}


@register.simple_tag(takes_context=True)
def get_user_role(context):
    """Determine user role for navigation"""
    request = context.get('request')
    if not request or not request.user.is_authenticated:
        return 'public'

    user = request.user

    if user.is_staff or user.is_superuser:
        return 'admin'

    # Check if user has staff profile
    if hasattr(user, 'staff_profile'):
        return 'teacher'

    return 'public'


def _resolve(url_name, args=None):
    """URL for a pattern name, or None when it does not exist"""
    try:
        return reverse(url_name, args=args)
    except NoReverseMatch:
        return None
