"""
Timetable background tasks.

Lessons are marked COMPLETED when they are taught; every night the ones
completed on earlier days go back to SCHEDULED so the weekly timetable starts
fresh. The work itself lives in ``apps.timetable.services`` so the CPanel
runner and the management command can call it without Celery.
"""

import logging
from datetime import date

from celery import shared_task
from django.utils import timezone

logger = logging.getLogger("timetable.tasks")


@shared_task(
    bind=True,
    name="timetable.reset_lesson_statuses",
    autoretry_for=(Exception,),
    retry_backoff=60,
    retry_backoff_max=600,
    retry_kwargs={"max_retries": 3},
)
def reset_lesson_statuses_task(self, today: str | None = None):
    """
    Reset lessons completed before ``today`` (ISO date, defaults to the
    local date) to SCHEDULED.
    """
    from apps.timetable.services import reset_completed_lessons

    task_id = self.request.id
    day = date.fromisoformat(today) if today else timezone.localdate()

    logger.info("[%s] Resetting completed lessons before %s", task_id, day)
    count = reset_completed_lessons(today=day)
    logger.info("[%s] %d lessons reset", task_id, count)

    return {
        "success": True,
        "reset": count,
        "date": day.isoformat(),
    }
