from django.contrib.auth.views import LogoutView
from django.urls import path

from . import views
from .views_auth import CustomLoginView

app_name = "corecode"

urlpatterns = [
    path("login/", CustomLoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("theme/toggle/", views.toggle_theme, name="toggle_theme"),
]
