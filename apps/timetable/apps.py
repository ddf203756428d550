from django.apps import AppConfig


class TimetableConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "apps.timetable"
    verbose_name = "Timetable"
