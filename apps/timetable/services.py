"""
Lesson lookups, conflict checks and status housekeeping
"""
import logging

from django.db import transaction
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .grid import CalendarGrid
from .models import Lesson
from .schedule import normalize, week_anchor

logger = logging.getLogger(__name__)


class LessonConflictError(Exception):
    """Raised when a lesson would overlap another lesson"""
    pass


class LessonLookupService:
    """Lessons belonging to a teacher or a semester"""

    OWNER_FILTERS = {
        'teacher': 'subject_offering__teacher_id',
        'semester': 'subject_offering__semester_id',
    }

    @classmethod
    def lessons_for(cls, owner_type, owner_id):
        try:
            lookup = cls.OWNER_FILTERS[owner_type]
        except KeyError:
            raise ValueError(f"Unknown lesson owner type: {owner_type!r}")

        return (
            Lesson.objects
            .filter(**{lookup: owner_id})
            .select_related('subject_offering__subject')
            .order_by('start_time')
        )

    @classmethod
    def occurrences_for(cls, owner_type, owner_id):
        return [lesson.to_occurrence() for lesson in cls.lessons_for(owner_type, owner_id)]


def build_calendar(owner_type, owner_id, reference=None):
    """Normalized weekly grid for a teacher or semester as of ``reference``"""
    reference = reference or timezone.localtime()
    lessons = list(LessonLookupService.lessons_for(owner_type, owner_id))
    occurrences = [lesson.to_occurrence() for lesson in lessons]
    schedule = normalize(occurrences, reference)
    monday = week_anchor(reference)
    logger.debug(
        "Calendar for %s %s: %d of %d lessons placed on week of %s",
        owner_type, owner_id, len(schedule), len(occurrences), monday.date(),
    )
    return CalendarGrid.build(
        schedule,
        monday,
        now=reference,
        statuses={lesson.pk: lesson.status for lesson in lessons},
    )


def check_lesson_conflicts(day, start_time, end_time, subject_offering, exclude_pk=None):
    """
    Make sure neither the subject offering nor its teacher already has a
    lesson overlapping ``[start_time, end_time)`` on ``day``.

    Raises:
        LessonConflictError: describing the first conflict found
    """
    overlapping = Lesson.objects.filter(
        day=day,
        start_time__lt=end_time,
        end_time__gt=start_time,
    ).exclude(status=Lesson.Status.CANCELLED)
    if exclude_pk is not None:
        overlapping = overlapping.exclude(pk=exclude_pk)

    if overlapping.filter(subject_offering=subject_offering).exists():
        raise LessonConflictError(
            _("There is already a lesson scheduled during this time slot.")
        )

    if overlapping.filter(subject_offering__teacher_id=subject_offering.teacher_id).exists():
        raise LessonConflictError(
            _("The teacher is already assigned to another lesson during this time slot.")
        )


def reset_completed_lessons(today=None):
    """
    Put lessons completed before ``today`` back to scheduled for the next week.

    Returns: number of lessons reset
    """
    today = today or timezone.localdate()
    with transaction.atomic():
        count = Lesson.objects.filter(
            status=Lesson.Status.COMPLETED,
            completed_on__lt=today,
        ).update(
            status=Lesson.Status.SCHEDULED,
            completed_on=None,
            updated_at=timezone.now(),
        )
    logger.info("Reset %d lessons from COMPLETED to SCHEDULED", count)
    return count
