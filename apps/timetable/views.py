import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin, PermissionRequiredMixin
from django.contrib.messages.views import SuccessMessageMixin
from django.core.exceptions import PermissionDenied
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET, require_POST
from django.views.generic import ListView, TemplateView, View
from django.views.generic.edit import CreateView, DeleteView, UpdateView

from apps.corecode.models import Semester
from apps.staffs.models import Staff

from .forms import LessonForm
from .indicator import TimeIndicator, grid_bounds, refresh_interval
from .models import Lesson
from .schedule import normalize
from .services import LessonLookupService, build_calendar

logger = logging.getLogger(__name__)

OWNER_MODELS = {
    'teacher': Staff,
    'semester': Semester,
}


def can_view_calendar(user, owner_type, owner):
    """Staff see every calendar; a teacher sees their own"""
    if user.is_superuser or user.is_staff:
        return True
    if owner_type == 'teacher':
        return getattr(user, 'staff_profile', None) == owner
    return False


def get_calendar_owner(request, owner_type, pk):
    try:
        model = OWNER_MODELS[owner_type]
    except KeyError:
        raise PermissionDenied(_("Unknown calendar"))
    owner = get_object_or_404(model, pk=pk)
    if not can_view_calendar(request.user, owner_type, owner):
        raise PermissionDenied(_("You cannot view this calendar"))
    return owner


class CalendarView(LoginRequiredMixin, TemplateView):
    """Weekly calendar of a teacher or a semester, mapped onto this week"""
    template_name = 'timetable/calendar.html'
    owner_type = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        owner = get_calendar_owner(self.request, self.owner_type, self.kwargs['pk'])

        context.update({
            'owner': owner,
            'owner_type': self.owner_type,
            'grid': build_calendar(self.owner_type, owner.pk),
            'indicator_interval_ms': refresh_interval() * 1000,
        })
        return context


class MyScheduleView(LoginRequiredMixin, View):
    """Send teachers to their own calendar and admins to the lesson list"""

    def get(self, request, *args, **kwargs):
        staff = getattr(request.user, 'staff_profile', None)
        if staff is not None:
            return redirect('timetable:teacher_calendar', pk=staff.pk)
        if request.user.is_staff or request.user.is_superuser:
            return redirect('timetable:lesson_list')
        raise PermissionDenied(_("No timetable is linked to this account"))


@login_required
@require_GET
def calendar_events_api(request, owner_type, pk):
    """Normalized lessons of a calendar as JSON events"""
    owner = get_calendar_owner(request, owner_type, pk)
    occurrences = LessonLookupService.occurrences_for(owner_type, owner.pk)
    events = normalize(occurrences, timezone.localtime())
    return JsonResponse({'events': [event.as_event() for event in events]})


@login_required
@require_GET
def time_indicator_api(request):
    """Indicator state of one grid row, polled by the calendar page"""
    first_hour, last_hour = grid_bounds()
    try:
        start_hour = int(request.GET.get('start_hour', ''))
    except ValueError:
        return JsonResponse({'error': 'start_hour must be an integer'}, status=400)

    if not first_hour <= start_hour < last_hour:
        return JsonResponse({'error': 'start_hour is outside the grid'}, status=400)

    indicator = TimeIndicator(start_hour)
    return JsonResponse(indicator.refresh().as_dict())


class LessonListView(LoginRequiredMixin, PermissionRequiredMixin, ListView):
    model = Lesson
    template_name = 'timetable/lesson_list.html'
    permission_required = 'timetable.view_lesson'
    context_object_name = 'lessons'
    paginate_by = 20

    def get_queryset(self):
        queryset = Lesson.objects.select_related(
            'subject_offering__subject',
            'subject_offering__teacher',
            'subject_offering__semester',
        )
        day = self.request.GET.get('day')
        if day in Lesson.Day.values:
            queryset = queryset.filter(day=day)
        teacher = self.request.GET.get('teacher')
        if teacher and teacher.isdigit():
            queryset = queryset.filter(subject_offering__teacher_id=teacher)
        return queryset.order_by('start_time')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['days'] = Lesson.Day.choices
        context['selected_day'] = self.request.GET.get('day', '')
        return context


class LessonCreateView(LoginRequiredMixin, PermissionRequiredMixin, SuccessMessageMixin, CreateView):
    model = Lesson
    form_class = LessonForm
    template_name = 'timetable/lesson_form.html'
    permission_required = 'timetable.add_lesson'
    success_url = reverse_lazy('timetable:lesson_list')
    success_message = "Lesson successfully scheduled."


class LessonUpdateView(LoginRequiredMixin, PermissionRequiredMixin, SuccessMessageMixin, UpdateView):
    model = Lesson
    form_class = LessonForm
    template_name = 'timetable/lesson_form.html'
    permission_required = 'timetable.change_lesson'
    success_url = reverse_lazy('timetable:lesson_list')
    success_message = "Lesson successfully updated."


class LessonDeleteView(LoginRequiredMixin, PermissionRequiredMixin, DeleteView):
    model = Lesson
    template_name = 'timetable/lesson_confirm_delete.html'
    permission_required = 'timetable.delete_lesson'
    success_url = reverse_lazy('timetable:lesson_list')

    def form_valid(self, form):
        messages.success(self.request, _("Lesson deleted."))
        return super().form_valid(form)


@login_required
@require_POST
def complete_lesson(request, pk):
    """Mark a lesson as taught today"""
    lesson = get_object_or_404(Lesson.objects.select_related('subject_offering__teacher'), pk=pk)

    is_owner = getattr(request.user, 'staff_profile', None) == lesson.teacher
    if not (is_owner or request.user.has_perm('timetable.change_lesson')):
        return JsonResponse({'error': 'Unauthorized'}, status=403)

    if lesson.status == Lesson.Status.CANCELLED:
        return JsonResponse({'error': 'Cancelled lessons cannot be completed'}, status=400)

    lesson.mark_completed()
    logger.info("Lesson %s marked completed by %s", lesson.pk, request.user)
    return JsonResponse({'success': True, 'status': lesson.status})
