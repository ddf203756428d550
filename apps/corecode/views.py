from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .context_processors import DARK, LIGHT, THEME_SESSION_KEY


@login_required
@require_POST
def toggle_theme(request):
    """Switch the session between light and dark display"""
    current = request.session.get(THEME_SESSION_KEY, LIGHT)
    request.session[THEME_SESSION_KEY] = LIGHT if current == DARK else DARK

    next_url = request.POST.get("next") or request.META.get("HTTP_REFERER")
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return redirect(next_url)
    return redirect("timetable:my_schedule")
