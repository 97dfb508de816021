"""
Service layer unit tests for meals app.

Tests cover:
- One meal per student, date and type
- Status checks before writes
- Weekly menu templates and today's menu
- Serving schedules and reports
"""

import pytest
from datetime import date, time, timedelta
from uuid import uuid4
from unittest.mock import patch

from django.db import DatabaseError
from django.utils import timezone

from apps.meals.models import MealRecord, MealType, WeeklyMenuTemplate, MENU_NOT_SET
from apps.meals.services import (
    record_meal,
    get_todays_meals,
    get_meal_history,
    day_of_week,
    list_menu_templates,
    update_menu_template,
    get_menu_for_day,
    get_todays_menu,
    list_schedules,
    update_schedule,
    MealReportQueries,
)
from apps.meals.services.exceptions import (
    StudentNotActiveError,
    DuplicateMealError,
    MealRecordingError,
    MenuValidationError,
    ScheduleNotFoundError,
    InvalidScheduleError,
)


# =============================================================================
# Meal Recording Service Tests
# =============================================================================

@pytest.mark.django_db
class TestMealRecording:

    def test_record_meal(self, student, staff_user):
        meal = record_meal(student=student, meal_type=MealType.LUNCH, recorded_by=staff_user)

        assert meal.meal_date == timezone.localdate()
        assert meal.recorded_by == staff_user
        assert list(get_todays_meals(student=student)) == [meal]

    def test_second_record_same_day_is_duplicate(self, student, staff_user):
        record_meal(student=student, meal_type=MealType.LUNCH, recorded_by=staff_user)

        with pytest.raises(DuplicateMealError, match="Meal already recorded for today"):
            record_meal(student=student, meal_type=MealType.LUNCH, recorded_by=staff_user)

        assert MealRecord.objects.filter(student=student).count() == 1

    def test_duplicate_on_other_date_names_the_date(self, student, staff_user, monday):
        record_meal(student=student, meal_type=MealType.DINNER, recorded_by=staff_user, meal_date=monday)

        with pytest.raises(DuplicateMealError, match="2024-05-06"):
            record_meal(student=student, meal_type=MealType.DINNER, recorded_by=staff_user, meal_date=monday)

    def test_different_meal_types_same_day(self, student, staff_user):
        for meal_type in MealType.values:
            record_meal(student=student, meal_type=meal_type, recorded_by=staff_user)

        assert get_todays_meals(student=student).count() == 3

    def test_inactive_student_rejected_before_write(self, suspended_student, staff_user):
        with patch.object(MealRecord.objects, 'create') as mock_create:
            with pytest.raises(StudentNotActiveError):
                record_meal(student=suspended_student, meal_type=MealType.LUNCH, recorded_by=staff_user)

        mock_create.assert_not_called()

    def test_store_failure_uses_fixed_message(self, student, staff_user):
        with patch.object(MealRecord.objects, 'create', side_effect=DatabaseError("disk full")):
            with pytest.raises(MealRecordingError, match="Failed to record meal"):
                record_meal(student=student, meal_type=MealType.LUNCH, recorded_by=staff_user)

    def test_recording_refreshes_report_stats(self, student, staff_user):
        assert MealReportQueries.meal_stats()['total'] == 0

        record_meal(student=student, meal_type=MealType.BREAKFAST, recorded_by=staff_user)

        stats = MealReportQueries.meal_stats()
        assert stats['total'] == 1
        assert stats['breakfast'] == 1


@pytest.mark.django_db
class TestMealHistory:

    def test_history_grouped_by_date(self, student, meal_history):
        history = get_meal_history(student=student)

        assert history == [
            {'date': date(2024, 5, 7), 'breakfast': False, 'lunch': True, 'dinner': False},
            {'date': date(2024, 5, 6), 'breakfast': True, 'lunch': False, 'dinner': True},
        ]

    def test_history_limited_to_latest_records(self, student, staff_user):
        start = date(2024, 1, 1)
        for offset in range(35):
            MealRecord.objects.create(
                student=student,
                meal_date=start + timedelta(days=offset),
                meal_type=MealType.LUNCH,
                recorded_by=staff_user,
            )

        history = get_meal_history(student=student)

        assert len(history) == 30
        assert history[0]['date'] == start + timedelta(days=34)

    def test_history_of_other_student_is_empty(self, other_student, meal_history):
        assert get_meal_history(student=other_student) == []


# =============================================================================
# Menu Service Tests
# =============================================================================

@pytest.mark.django_db
class TestMenu:

    def test_day_of_week(self, monday):
        assert day_of_week(monday) == 'Monday'
        assert day_of_week(monday + timedelta(days=6)) == 'Sunday'

    def test_seeded_templates_in_day_order(self):
        templates = list_menu_templates()

        assert len(templates) == 21
        assert (templates[0].day_of_week, templates[0].meal_type) == ('Monday', 'breakfast')
        assert (templates[-1].day_of_week, templates[-1].meal_type) == ('Sunday', 'dinner')
        assert all(t.main_dish == MENU_NOT_SET for t in templates)

    def test_update_trims_dish(self):
        template = update_menu_template(
            day='Tuesday',
            meal_type=MealType.DINNER,
            main_dish='  Pasta  ',
            description=' Tomato sauce ',
        )

        assert template.main_dish == 'Pasta'
        assert template.description == 'Tomato sauce'
        assert WeeklyMenuTemplate.objects.count() == 21

    @pytest.mark.parametrize('dish', ['', '   '])
    def test_update_requires_dish(self, dish):
        with pytest.raises(MenuValidationError, match="Please enter a main dish"):
            update_menu_template(day='Tuesday', meal_type=MealType.DINNER, main_dish=dish)

    def test_unconfigured_meals_are_marked(self, monday_lunch):
        menu = get_menu_for_day(day='Monday')

        assert menu['lunch'] == {
            'meal_type': 'lunch',
            'configured': True,
            'main_dish': 'Rice and beans',
            'description': 'With salad',
        }
        assert menu['breakfast'] == {'meal_type': 'breakfast', 'configured': False}
        assert menu['dinner'] == {'meal_type': 'dinner', 'configured': False}

    def test_missing_template_row_is_unconfigured(self):
        WeeklyMenuTemplate.objects.filter(day_of_week='Friday', meal_type=MealType.LUNCH).delete()

        menu = get_menu_for_day(day='Friday')

        assert menu['lunch'] == {'meal_type': 'lunch', 'configured': False}

    def test_update_invalidates_cached_menu(self, monday):
        assert get_todays_menu(today=monday)['meals']['dinner']['configured'] is False

        update_menu_template(day='Monday', meal_type=MealType.DINNER, main_dish='Soup')

        assert get_todays_menu(today=monday)['meals']['dinner']['main_dish'] == 'Soup'


# =============================================================================
# Schedule and Report Tests
# =============================================================================

@pytest.mark.django_db
class TestSchedules:

    def test_seeded_schedules(self):
        schedules = list(list_schedules())

        assert [s.meal_type for s in schedules] == ['breakfast', 'lunch', 'dinner']
        assert schedules[1].start_time == time(12, 0)
        assert schedules[1].end_time == time(14, 0)

    def test_update_schedule(self, lunch_schedule):
        schedule = update_schedule(
            schedule_id=lunch_schedule.id,
            start_time=time(11, 30),
            end_time=time(13, 30),
        )

        assert schedule.start_time == time(11, 30)

    def test_end_must_follow_start(self, lunch_schedule):
        with pytest.raises(InvalidScheduleError, match="End time must be after start time"):
            update_schedule(
                schedule_id=lunch_schedule.id,
                start_time=time(13, 0),
                end_time=time(13, 0),
            )

    def test_unknown_schedule(self):
        with pytest.raises(ScheduleNotFoundError):
            update_schedule(schedule_id=uuid4(), start_time=time(7, 0), end_time=time(8, 0))


@pytest.mark.django_db
class TestReports:

    def test_recent_meals_newest_first(self, meal_history):
        recent = list(MealReportQueries.recent_meals())

        assert recent[0] == meal_history[-1]
        assert len(recent) == 3

    def test_recent_meals_limit(self, meal_history):
        assert len(MealReportQueries.recent_meals(limit=2)) == 2
