from datetime import date

from django.core.management.base import BaseCommand, CommandError
import logging

from apps.timetable.services import reset_completed_lessons
from tasks.config import TASK_CONFIG

logger = logging.getLogger('timetable.tasks')


class Command(BaseCommand):
    help = 'Reset lessons completed on earlier days back to SCHEDULED (for CPanel cron)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            help='Treat this ISO date (YYYY-MM-DD) as today'
        )
        parser.add_argument(
            '--queue',
            action='store_true',
            help='Send the work to Celery instead of running it here'
        )

    def handle(self, *args, **options):
        today = None
        if options['date']:
            try:
                today = date.fromisoformat(options['date'])
            except ValueError:
                raise CommandError(f"Invalid date: {options['date']}")

        if options['queue']:
            if not TASK_CONFIG['USE_CELERY']:
                raise CommandError("Celery is disabled in this environment; run without --queue")
            from tasks.timetable_tasks import reset_lesson_statuses_task
            result = reset_lesson_statuses_task.delay(today.isoformat() if today else None)
            self.stdout.write(f"Queued task {result.id}")
            return

        count = reset_completed_lessons(today=today)
        logger.info("reset_lesson_statuses command reset %d lessons", count)
        self.stdout.write(self.style.SUCCESS(f"Reset {count} lesson(s) to SCHEDULED"))
