"""
Celery configuration for Django project.
Named celery_app.py to avoid conflict with celery package.
"""
import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'school_app.settings')

app = Celery('timetable_background_tasks')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()


@app.task(name='health_check')
def health_check():
    """Simple health check task"""
    import datetime
    return {
        'status': 'healthy',
        'timestamp': datetime.datetime.now().isoformat()
    }


import tasks.timetable_tasks  # noqa: E402,F401
