import os

from celery import Celery
from celery.signals import setup_logging
from django_structlog.celery.steps import DjangoStructLogInitStep

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "golftour.settings")

app = Celery("golftour")

# All CELERY_ prefixed keys in the django settings configure the app
app.config_from_object("django.conf:settings", namespace="CELERY")

# Carries the request_id of the finalize request into the worker's logs
app.steps["worker"].add(DjangoStructLogInitStep)


@setup_logging.connect
def config_loggers(*args, **kwargs):
    from logging.config import dictConfig  # noqa
    from django.conf import settings  # noqa

    dictConfig(settings.LOGGING)


app.autodiscover_tasks(["tours"])
