"""
Meal recording service.

The one-record-per-(student, date, meal type) rule is enforced by the
database constraint on MealRecord; this module only translates the
violation into DuplicateMealError.
"""

import logging
from collections import OrderedDict
from datetime import date
from typing import List, Optional

from django.conf import settings
from django.core.cache import cache
from django.db import transaction, IntegrityError, DatabaseError
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.meals.models import MealRecord, MealType
from apps.students.models import Student

from .exceptions import (
    StudentNotActiveError,
    DuplicateMealError,
    MealRecordingError,
)
from .reports import MEAL_STATS_CACHE_KEY

logger = logging.getLogger(__name__)


def record_meal(
    *,
    student: Student,
    meal_type: str,
    recorded_by: User,
    meal_date: Optional[date] = None
) -> MealRecord:
    """
    Record that a student was served a meal.

    Args:
        student: Student being served
        meal_type: breakfast, lunch or dinner
        recorded_by: Staff user doing the recording
        meal_date: Service date, defaults to today

    Returns:
        Created MealRecord

    Raises:
        StudentNotActiveError: If the student's status is not active
            (checked before anything is written)
        DuplicateMealError: If the meal was already recorded
        MealRecordingError: If the store rejects the write otherwise
    """
    if not student.can_receive_meals:
        raise StudentNotActiveError(
            f"Cannot record meals for a student with status '{student.status}'"
        )

    today = timezone.localdate()
    meal_date = meal_date or today

    try:
        with transaction.atomic():
            meal = MealRecord.objects.create(
                student=student,
                meal_type=meal_type,
                meal_date=meal_date,
                recorded_by=recorded_by,
            )
    except IntegrityError:
        logger.info(
            "Duplicate %s for %s on %s rejected",
            meal_type, student.student_id, meal_date,
        )
        if meal_date == today:
            raise DuplicateMealError("Meal already recorded for today")
        raise DuplicateMealError(f"Meal already recorded for {meal_date.isoformat()}")
    except DatabaseError:
        logger.exception("Failed to record %s for %s", meal_type, student.student_id)
        raise MealRecordingError("Failed to record meal")

    cache.delete(MEAL_STATS_CACHE_KEY)
    logger.info(
        "Recorded %s for %s on %s",
        meal_type, student.student_id, meal_date,
    )
    return meal


def get_todays_meals(*, student: Student, today: Optional[date] = None) -> QuerySet[MealRecord]:
    """Meals already recorded for the student today."""
    return MealRecord.objects.filter(
        student=student,
        meal_date=today or timezone.localdate(),
    ).order_by('created_at')


def get_meal_history(*, student: Student, limit: Optional[int] = None) -> List[dict]:
    """
    Most recent meal records of a student, grouped by date.

    Only the last ``limit`` records (default MEAL_HISTORY_LIMIT) are
    considered, so the oldest date in the result may be partial.

    Returns:
        List of dicts, newest date first::

            {'date': date(2024, 5, 6), 'breakfast': True, 'lunch': False, 'dinner': True}
    """
    limit = limit or settings.MEAL_HISTORY_LIMIT
    records = (
        MealRecord.objects
        .filter(student=student)
        .order_by('-meal_date', '-created_at')
        .values('meal_date', 'meal_type')[:limit]
    )

    days = OrderedDict()
    for record in records:
        day = days.setdefault(
            record['meal_date'],
            {meal_type: False for meal_type in MealType.values},
        )
        day[record['meal_type']] = True

    return [{'date': meal_date, **flags} for meal_date, flags in days.items()]
