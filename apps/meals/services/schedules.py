"""Meal serving windows."""

from datetime import time
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.meals.models import MealSchedule

from .exceptions import ScheduleNotFoundError, InvalidScheduleError


def list_schedules() -> QuerySet[MealSchedule]:
    return MealSchedule.objects.order_by('start_time')


@transaction.atomic
def update_schedule(*, schedule_id: UUID, start_time: time, end_time: time) -> MealSchedule:
    """
    Change the serving window of a meal type.

    Raises:
        ScheduleNotFoundError: If the schedule does not exist
        InvalidScheduleError: If end_time is not after start_time
    """
    if end_time <= start_time:
        raise InvalidScheduleError("End time must be after start time")

    try:
        schedule = MealSchedule.objects.select_for_update().get(id=schedule_id)
    except MealSchedule.DoesNotExist:
        raise ScheduleNotFoundError("Schedule not found")

    schedule.start_time = start_time
    schedule.end_time = end_time
    schedule.save(update_fields=['start_time', 'end_time', 'updated_at'])
    return schedule
