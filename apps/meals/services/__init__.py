"""
Meals app services layer.

Meal recording, weekly menu templates, serving schedules and reports.
"""

from .exceptions import (
    MealsServiceError,
    StudentNotActiveError,
    DuplicateMealError,
    MealRecordingError,
    MenuValidationError,
    MenuTemplateNotFoundError,
    ScheduleNotFoundError,
    InvalidScheduleError,
)

from .meal_recording import (
    record_meal,
    get_todays_meals,
    get_meal_history,
)

from .menu import (
    day_of_week,
    list_menu_templates,
    update_menu_template,
    get_menu_for_day,
    get_todays_menu,
)

from .schedules import (
    list_schedules,
    update_schedule,
)

from .reports import MealReportQueries


__all__ = [
    # Exceptions
    'MealsServiceError',
    'StudentNotActiveError',
    'DuplicateMealError',
    'MealRecordingError',
    'MenuValidationError',
    'MenuTemplateNotFoundError',
    'ScheduleNotFoundError',
    'InvalidScheduleError',

    # Meal Recording
    'record_meal',
    'get_todays_meals',
    'get_meal_history',

    # Menu
    'day_of_week',
    'list_menu_templates',
    'update_menu_template',
    'get_menu_for_day',
    'get_todays_menu',

    # Schedules
    'list_schedules',
    'update_schedule',

    # Reports
    'MealReportQueries',
]
