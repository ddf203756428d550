from datetime import date, datetime, timedelta

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .schedule import LessonOccurrence


class SubjectOffering(models.Model):
    """A subject taught by a teacher during a semester"""

    subject = models.ForeignKey(
        'corecode.Subject',
        on_delete=models.CASCADE,
        related_name='offerings',
        verbose_name=_("Subject")
    )
    teacher = models.ForeignKey(
        'staffs.Staff',
        on_delete=models.CASCADE,
        related_name='subject_offerings',
        verbose_name=_("Teacher")
    )
    semester = models.ForeignKey(
        'corecode.Semester',
        on_delete=models.CASCADE,
        related_name='subject_offerings',
        verbose_name=_("Semester")
    )

    class Meta:
        ordering = ['semester', 'subject__name']
        constraints = [
            models.UniqueConstraint(
                fields=['subject', 'teacher', 'semester'],
                name='unique_subject_offering',
            ),
        ]

    def __str__(self):
        return f"{self.subject} ({self.teacher}, {self.semester.name})"


class Lesson(models.Model):
    """
    A weekly lesson slot.

    ``start_time``/``end_time`` are anchored on the week starting
    ``ANCHOR_MONDAY`` so the stored weekday always matches ``day``; calendars
    move them onto the current week before display.
    """

    ANCHOR_MONDAY = date(1970, 1, 5)

    class Day(models.TextChoices):
        MONDAY = 'MONDAY', _('Monday')
        TUESDAY = 'TUESDAY', _('Tuesday')
        WEDNESDAY = 'WEDNESDAY', _('Wednesday')
        THURSDAY = 'THURSDAY', _('Thursday')
        FRIDAY = 'FRIDAY', _('Friday')

    class Status(models.TextChoices):
        SCHEDULED = 'SCHEDULED', _('Scheduled')
        COMPLETED = 'COMPLETED', _('Completed')
        CANCELLED = 'CANCELLED', _('Cancelled')

    day = models.CharField(max_length=10, choices=Day.choices, verbose_name=_("Day"))
    subject_offering = models.ForeignKey(
        SubjectOffering,
        on_delete=models.CASCADE,
        related_name='lessons',
        verbose_name=_("Subject Offering")
    )
    start_time = models.DateTimeField(verbose_name=_("Start Time"))
    end_time = models.DateTimeField(verbose_name=_("End Time"))
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.SCHEDULED,
        verbose_name=_("Status")
    )
    completed_on = models.DateField(null=True, blank=True, verbose_name=_("Completed On"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['start_time']
        verbose_name = _('Lesson')
        verbose_name_plural = _('Lessons')

    def __str__(self):
        start = timezone.localtime(self.start_time)
        return f"{self.subject_offering.subject} - {self.get_day_display()} {start:%H:%M}"

    @classmethod
    def anchor(cls, day, time_of_day):
        """Aware timestamp for ``time_of_day`` on ``day`` of the anchor week"""
        offset = list(cls.Day.values).index(day)
        naive = datetime.combine(cls.ANCHOR_MONDAY + timedelta(days=offset), time_of_day)
        return timezone.make_aware(naive)

    @property
    def teacher(self):
        return self.subject_offering.teacher

    @property
    def title(self):
        return self.subject_offering.subject.name

    def clean(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValidationError({'end_time': _("End time must be after start time")})

    def mark_completed(self, on=None):
        self.status = self.Status.COMPLETED
        self.completed_on = on or timezone.localdate()
        self.save(update_fields=['status', 'completed_on', 'updated_at'])

    def to_occurrence(self):
        return LessonOccurrence(
            id=self.pk,
            title=self.title,
            start=timezone.localtime(self.start_time),
            end=timezone.localtime(self.end_time),
        )
