from celery import Celery

from event_booking.core.config import get_redis_url


def make_celery(app_name: str = "event_booking") -> Celery:
    redis_url = get_redis_url()
    celery = Celery(app_name, broker=redis_url, backend=redis_url, include=["event_booking.tasks"])
    celery.conf.update(
        task_serializer="json",
        result_serializer="json",
        accept_content=["json"],
        result_persistent=False,
        task_ignore_result=True,
        # publishing fails fast when the broker is unreachable
        task_publish_retry=False,
    )
    return celery


celery_app = make_celery()
