#!/usr/bin/env python
"""
CPanel task runner - executes tasks synchronously when Celery is not available
"""
import os
import sys
import django
import logging

# Setup Django
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'school_app.settings')
django.setup()

from apps.timetable.services import reset_completed_lessons  # noqa: E402

logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def run_reset_lesson_statuses():
    """Run the nightly lesson status reset"""
    logger.info("Resetting completed lessons")
    return reset_completed_lessons()


COMMANDS = {
    'reset_lesson_statuses': run_reset_lesson_statuses,
}


if __name__ == "__main__":
    # This script can be called from CPanel cron jobs
    # Example: python cpanel_tasks/run_tasks.py reset_lesson_statuses
    if len(sys.argv) > 1 and sys.argv[1] in COMMANDS:
        result = COMMANDS[sys.argv[1]]()
        print(f"Result: {result}")
    else:
        print("Unknown command. Available commands:")
        for name in COMMANDS:
            print(f"  {name}")
        sys.exit(1)
