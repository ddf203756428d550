from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("apps.corecode.urls")),
    path("timetable/", include("apps.timetable.urls")),
    path("", RedirectView.as_view(pattern_name="timetable:my_schedule", permanent=False), name="index"),
]
