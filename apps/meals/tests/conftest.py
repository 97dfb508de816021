import pytest
from datetime import date

from apps.meals.models import MealRecord, MealType, MealSchedule, WeeklyMenuTemplate


@pytest.fixture
def monday():
    return date(2024, 5, 6)


@pytest.fixture
def lunch_schedule(db):
    return MealSchedule.objects.get(meal_type=MealType.LUNCH)


@pytest.fixture
def monday_lunch(db):
    """Seeded Monday lunch template with a dish filled in."""
    template = WeeklyMenuTemplate.objects.get(day_of_week='Monday', meal_type=MealType.LUNCH)
    template.main_dish = 'Rice and beans'
    template.description = 'With salad'
    template.save()
    return template


@pytest.fixture
def meal_history(student, staff_user):
    """Breakfast and dinner on May 6th, lunch on May 7th."""
    records = [
        (date(2024, 5, 6), MealType.BREAKFAST),
        (date(2024, 5, 6), MealType.DINNER),
        (date(2024, 5, 7), MealType.LUNCH),
    ]
    return [
        MealRecord.objects.create(
            student=student,
            meal_date=meal_date,
            meal_type=meal_type,
            recorded_by=staff_user,
        )
        for meal_date, meal_type in records
    ]
