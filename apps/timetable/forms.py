"""
Forms for lesson management
"""
from datetime import time

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .indicator import grid_bounds
from .models import Lesson, SubjectOffering
from .services import LessonConflictError, check_lesson_conflicts


def time_options(ends=False):
    """
    Hourly slots of the grid, e.g. ('09:00', '9 AM').

    Lessons start from the first hour up to the last visible row and end
    one hour later at the earliest, so the closing hour is an end slot only.
    """
    first_hour, last_hour = grid_bounds()
    hours = range(first_hour + 1, last_hour + 1) if ends else range(first_hour, last_hour)
    options = []
    for hour in hours:
        display_hour = hour % 12 or 12
        period = "AM" if hour < 12 else "PM"
        options.append((f"{hour:02d}:00", f"{display_hour} {period}"))
    return options


class LessonForm(forms.ModelForm):
    """Create/update a weekly lesson from a day and two hour slots"""

    start = forms.TypedChoiceField(
        label=_("Start Time"),
        coerce=time.fromisoformat,
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    end = forms.TypedChoiceField(
        label=_("End Time"),
        coerce=time.fromisoformat,
        widget=forms.Select(attrs={'class': 'form-control'}),
    )

    class Meta:
        model = Lesson
        fields = ['day', 'subject_offering', 'status']
        widgets = {
            'day': forms.Select(attrs={'class': 'form-control'}),
            'subject_offering': forms.Select(attrs={'class': 'form-control'}),
            'status': forms.Select(attrs={'class': 'form-control'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['start'].choices = time_options()
        self.fields['end'].choices = time_options(ends=True)
        self.fields['subject_offering'].queryset = SubjectOffering.objects.select_related(
            'subject', 'teacher', 'semester'
        )

        if self.instance.pk:
            self.initial['start'] = f"{timezone.localtime(self.instance.start_time):%H:00}"
            self.initial['end'] = f"{timezone.localtime(self.instance.end_time):%H:00}"
        else:
            # status only matters once the lesson exists
            del self.fields['status']

    def clean(self):
        cleaned_data = super().clean()
        day = cleaned_data.get('day')
        start = cleaned_data.get('start')
        end = cleaned_data.get('end')
        subject_offering = cleaned_data.get('subject_offering')

        if not (day and start and end and subject_offering):
            return cleaned_data

        if end <= start:
            raise ValidationError({'end': _("End time must be after start time")})

        start_time = Lesson.anchor(day, start)
        end_time = Lesson.anchor(day, end)

        try:
            check_lesson_conflicts(
                day, start_time, end_time, subject_offering, exclude_pk=self.instance.pk
            )
        except LessonConflictError as e:
            raise ValidationError(str(e))

        self.instance.start_time = start_time
        self.instance.end_time = end_time
        return cleaned_data
