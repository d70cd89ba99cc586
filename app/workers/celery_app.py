from celery import Celery
from app.core.config import settings

celery_app = Celery("sunnah_foundation_site", broker=settings.REDIS_URL, backend=settings.REDIS_URL)
celery_app.conf.imports = ("app.workers.tasks.newsletter",)
celery_app.conf.task_default_queue = "site"
