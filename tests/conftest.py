from datetime import time

import pytest
from django.contrib.auth.models import Permission, User

from apps.corecode.models import Course, Semester, Subject
from apps.staffs.models import Staff
from apps.timetable.models import Lesson, SubjectOffering


@pytest.fixture
def semester(db):
    course = Course.objects.create(name="Computer Science", code="CS")
    return Semester.objects.create(name="Semester 1", course=course, current=True)


@pytest.fixture
def teacher_user(db):
    return User.objects.create_user(username="teacher", password="pass12345")


@pytest.fixture
def teacher(teacher_user):
    return Staff.objects.create(surname="Okafor", firstname="Ada", user=teacher_user)


@pytest.fixture
def other_teacher(db):
    return Staff.objects.create(surname="Bello", firstname="Musa")


@pytest.fixture
def offering(teacher, semester):
    subject = Subject.objects.create(name="Mathematics")
    return SubjectOffering.objects.create(subject=subject, teacher=teacher, semester=semester)


@pytest.fixture
def make_lesson(offering):
    def _make(day=Lesson.Day.MONDAY, start=time(9), end=time(10), subject_offering=None, **extra):
        return Lesson.objects.create(
            day=day,
            subject_offering=subject_offering or offering,
            start_time=Lesson.anchor(day, start),
            end_time=Lesson.anchor(day, end),
            **extra,
        )
    return _make


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(username="admin", password="pass12345", email="admin@example.com")


@pytest.fixture
def manager_user(db):
    user = User.objects.create_user(username="manager", password="pass12345", is_staff=True)
    user.user_permissions.set(
        Permission.objects.filter(
            content_type__app_label="timetable",
            codename__in=["view_lesson", "add_lesson", "change_lesson", "delete_lesson"],
        )
    )
    return user


@pytest.fixture
def teacher_client(client, teacher):
    client.force_login(teacher.user)
    return client
