from django.urls import path

from . import views

app_name = "timetable"

urlpatterns = [
    # Calendars
    path("my-schedule/", views.MyScheduleView.as_view(), name="my_schedule"),
    path("teacher/<int:pk>/", views.CalendarView.as_view(owner_type="teacher"), name="teacher_calendar"),
    path("semester/<int:pk>/", views.CalendarView.as_view(owner_type="semester"), name="semester_calendar"),

    # Lessons
    path("lessons/", views.LessonListView.as_view(), name="lesson_list"),
    path("lessons/create/", views.LessonCreateView.as_view(), name="lesson_create"),
    path("lessons/<int:pk>/update/", views.LessonUpdateView.as_view(), name="lesson_update"),
    path("lessons/<int:pk>/delete/", views.LessonDeleteView.as_view(), name="lesson_delete"),
    path("lessons/<int:pk>/complete/", views.complete_lesson, name="lesson_complete"),

    # API Endpoints
    path("api/<str:owner_type>/<int:pk>/events/", views.calendar_events_api, name="calendar_events"),
    path("api/indicator/", views.time_indicator_api, name="time_indicator"),
]
