from django.conf import settings

from .models import SiteConfig

THEME_SESSION_KEY = "theme"
DARK = "dark"
LIGHT = "light"


def site_defaults(request):
    """Site configuration values plus the school name"""
    contexts = {"school_name": getattr(settings, "SCHOOL_NAME", "")}
    for config in SiteConfig.objects.all():
        contexts[config.key] = config.value
    return contexts


def theme(request):
    """
    Display theme chosen for this session.

    Templates read it from ``theme`` rather than any global UI state.
    """
    session = getattr(request, "session", None)
    name = session.get(THEME_SESSION_KEY, LIGHT) if session is not None else LIGHT
    if name not in (DARK, LIGHT):
        name = LIGHT
    return {"theme": {"name": name, "dark_mode": name == DARK}}
