"""
Configuration for background tasks - NO EARLY DJANGO IMPORTS
"""
import os
import logging

logger = logging.getLogger(__name__)

# Use explicit environment variable for CPanel detection
ENV_TYPE = os.environ.get('ENV_TYPE', 'STANDARD').upper()
IS_CPANEL = ENV_TYPE == 'CPANEL'

# Broker configuration - prioritize environment variables
BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')
RESULT_BACKEND = os.environ.get('CELERY_RESULT_BACKEND', 'django-db')

TASK_CONFIG = {
    'USE_CELERY': not IS_CPANEL,  # cron + management commands on CPanel
    'IS_CPANEL': IS_CPANEL,
    'ENV_TYPE': ENV_TYPE,
    'BROKER_URL': BROKER_URL,
    'RESULT_BACKEND': RESULT_BACKEND,
}

logger.debug("Task configuration: env=%s broker=%s backend=%s", ENV_TYPE, BROKER_URL, RESULT_BACKEND)
