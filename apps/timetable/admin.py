from django.contrib import admin
from django.utils import timezone

from .models import Lesson, SubjectOffering


@admin.register(SubjectOffering)
class SubjectOfferingAdmin(admin.ModelAdmin):
    list_display = ('subject', 'teacher', 'semester', 'lesson_count')
    list_filter = ('semester', 'subject')
    search_fields = ('subject__name', 'teacher__surname', 'teacher__firstname')

    def lesson_count(self, obj):
        return obj.lessons.count()
    lesson_count.short_description = 'Lessons'


@admin.register(Lesson)
class LessonAdmin(admin.ModelAdmin):
    list_display = ('subject_offering', 'day', 'time_range', 'status', 'completed_on')
    list_filter = ('day', 'status', 'subject_offering__semester')
    readonly_fields = ('completed_on', 'created_at', 'updated_at')

    def time_range(self, obj):
        start = timezone.localtime(obj.start_time)
        end = timezone.localtime(obj.end_time)
        return f"{start:%H:%M} - {end:%H:%M}"
    time_range.short_description = 'Time'
