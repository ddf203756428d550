import functools
from datetime import datetime, time, timezone as dt_timezone

import pytest
from django.urls import reverse

from apps.timetable import views
from apps.timetable.indicator import TimeIndicator
from apps.timetable.models import Lesson

pytestmark = pytest.mark.django_db


def test_calendar_requires_login(client, teacher):
    response = client.get(reverse("timetable:teacher_calendar", args=[teacher.pk]))
    assert response.status_code == 302


def test_teacher_sees_own_calendar(teacher_client, teacher, make_lesson):
    make_lesson()

    response = teacher_client.get(reverse("timetable:teacher_calendar", args=[teacher.pk]))

    assert response.status_code == 200
    assert b"Mathematics" in response.content
    assert len(response.context["grid"].blocks) == 1


def test_cancelled_lesson_is_drawn_with_its_status(teacher_client, teacher, make_lesson):
    make_lesson(status=Lesson.Status.CANCELLED)

    response = teacher_client.get(reverse("timetable:teacher_calendar", args=[teacher.pk]))

    assert len(response.context["grid"].blocks) == 1
    assert b'data-status="CANCELLED"' in response.content
    assert b"Cancelled" in response.content


def test_calendar_header_matches_row_width(teacher_client, teacher):
    response = teacher_client.get(reverse("timetable:teacher_calendar", args=[teacher.pk]))
    content = response.content.decode()

    head, body = content.split("<tbody>", 1)
    first_row = body.split("</tr>", 1)[0]
    header_cells = head.split("<thead>", 1)[1].count("<th")
    row_cells = first_row.count("<th") + first_row.count("<td")
    assert header_cells == row_cells == len(response.context["grid"].columns) + 2


def test_teacher_cannot_see_other_calendars(teacher_client, other_teacher, semester):
    assert teacher_client.get(
        reverse("timetable:teacher_calendar", args=[other_teacher.pk])
    ).status_code == 403
    assert teacher_client.get(
        reverse("timetable:semester_calendar", args=[semester.pk])
    ).status_code == 403


def test_admin_sees_semester_calendar(client, admin_user, semester, make_lesson):
    make_lesson()
    client.force_login(admin_user)

    response = client.get(reverse("timetable:semester_calendar", args=[semester.pk]))

    assert response.status_code == 200
    assert b"Mathematics" in response.content


def test_missing_calendar_owner_is_404(client, admin_user):
    client.force_login(admin_user)
    assert client.get(reverse("timetable:teacher_calendar", args=[999])).status_code == 404


def test_my_schedule_redirects_teacher(teacher_client, teacher):
    response = teacher_client.get(reverse("timetable:my_schedule"))
    assert response.url == reverse("timetable:teacher_calendar", args=[teacher.pk])


def test_my_schedule_redirects_admin_to_lessons(client, admin_user):
    client.force_login(admin_user)
    response = client.get(reverse("timetable:my_schedule"))
    assert response.url == reverse("timetable:lesson_list")


def test_events_api_returns_this_weeks_lessons(teacher_client, teacher, make_lesson):
    lesson = make_lesson(day=Lesson.Day.FRIDAY)

    response = teacher_client.get(reverse("timetable:calendar_events", args=["teacher", teacher.pk]))

    [event] = response.json()["events"]
    assert event["id"] == lesson.pk
    assert event["title"] == "Mathematics"
    start = datetime.fromisoformat(event["start"])
    assert start.isoweekday() == 5
    assert start.year >= 2024


def test_indicator_api(teacher_client, monkeypatch):
    fixed = functools.partial(TimeIndicator, clock=lambda: datetime(2024, 6, 12, 10, 30))
    monkeypatch.setattr(views, "TimeIndicator", fixed)

    response = teacher_client.get(reverse("timetable:time_indicator"), {"start_hour": 10})

    assert response.json() == {
        "visible": True,
        "offset_percent": 50.0,
        "out_of_range": False,
        "label": "Now",
    }


def test_indicator_api_uses_server_time_zone(teacher_client, settings, monkeypatch):
    settings.TIME_ZONE = "Africa/Lagos"
    monkeypatch.setattr(
        "django.utils.timezone.now",
        lambda: datetime(2024, 6, 12, 9, 30, tzinfo=dt_timezone.utc),
    )

    response = teacher_client.get(reverse("timetable:time_indicator"), {"start_hour": 10})

    assert response.json()["offset_percent"] == 50.0
    assert response.json()["visible"] is True


@pytest.mark.parametrize("start_hour", ["", "abc", "3", "18"])
def test_indicator_api_rejects_bad_rows(teacher_client, start_hour):
    response = teacher_client.get(reverse("timetable:time_indicator"), {"start_hour": start_hour})
    assert response.status_code == 400


def test_lesson_list_requires_permission(teacher_client):
    assert teacher_client.get(reverse("timetable:lesson_list")).status_code == 403


def test_manager_creates_lesson(client, manager_user, offering):
    client.force_login(manager_user)

    response = client.post(reverse("timetable:lesson_create"), {
        "day": "WEDNESDAY",
        "subject_offering": offering.pk,
        "start": "13:00",
        "end": "14:00",
    })

    assert response.status_code == 302
    lesson = Lesson.objects.get()
    assert lesson.day == Lesson.Day.WEDNESDAY


def test_manager_sees_conflict_error(client, manager_user, offering, make_lesson):
    make_lesson(start=time(9), end=time(10))
    client.force_login(manager_user)

    response = client.post(reverse("timetable:lesson_create"), {
        "day": "MONDAY",
        "subject_offering": offering.pk,
        "start": "09:00",
        "end": "10:00",
    })

    assert response.status_code == 200
    assert b"already a lesson" in response.content
    assert Lesson.objects.count() == 1


def test_lesson_list_filters_by_day(client, manager_user, make_lesson):
    make_lesson()
    make_lesson(day=Lesson.Day.TUESDAY)
    client.force_login(manager_user)

    response = client.get(reverse("timetable:lesson_list"), {"day": "TUESDAY"})

    assert [lesson.day for lesson in response.context["lessons"]] == ["TUESDAY"]


def test_manager_deletes_lesson(client, manager_user, make_lesson):
    lesson = make_lesson()
    client.force_login(manager_user)

    response = client.post(reverse("timetable:lesson_delete", args=[lesson.pk]))

    assert response.status_code == 302
    assert not Lesson.objects.exists()


def test_teacher_completes_own_lesson(teacher_client, make_lesson):
    lesson = make_lesson()

    response = teacher_client.post(reverse("timetable:lesson_complete", args=[lesson.pk]))

    assert response.json() == {"success": True, "status": "COMPLETED"}
    lesson.refresh_from_db()
    assert lesson.completed_on is not None


def test_other_user_cannot_complete_lesson(client, django_user_model, make_lesson):
    lesson = make_lesson()
    client.force_login(django_user_model.objects.create_user(username="someone", password="x"))

    response = client.post(reverse("timetable:lesson_complete", args=[lesson.pk]))

    assert response.status_code == 403


def test_cancelled_lesson_cannot_be_completed(teacher_client, make_lesson):
    lesson = make_lesson(status=Lesson.Status.CANCELLED)
    response = teacher_client.post(reverse("timetable:lesson_complete", args=[lesson.pk]))
    assert response.status_code == 400


def test_theme_toggle_is_session_context(teacher_client, teacher):
    calendar_url = reverse("timetable:teacher_calendar", args=[teacher.pk])

    response = teacher_client.get(calendar_url)
    assert response.context["theme"] == {"name": "light", "dark_mode": False}

    response = teacher_client.post(reverse("corecode:toggle_theme"), {"next": calendar_url})
    assert response.url == calendar_url

    response = teacher_client.get(calendar_url)
    assert response.context["theme"]["dark_mode"] is True
    assert b'class="dark"' in response.content


def test_login_routes_teacher_to_calendar(client, teacher):
    response = client.post(reverse("corecode:login"), {"username": "teacher", "password": "pass12345"})

    assert response.url == reverse("timetable:my_schedule")
    follow = client.get(response.url)
    assert follow.url == reverse("timetable:teacher_calendar", args=[teacher.pk])


def test_login_page_renders(client):
    response = client.get(reverse("corecode:login"))
    assert response.status_code == 200
    assert b"Sign in" in response.content
