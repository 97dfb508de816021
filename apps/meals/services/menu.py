"""
Weekly menu templates.

Templates recur every calendar week: one row per (weekday, meal type),
no date-specific overrides.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from django.core.cache import cache
from django.db import transaction
from django.utils import timezone

from apps.meals.models import WeeklyMenuTemplate, DayOfWeek, MealType

from .exceptions import MenuValidationError, MenuTemplateNotFoundError

logger = logging.getLogger(__name__)

DAY_ORDER = {day: index for index, day in enumerate(DayOfWeek.values)}
MEAL_ORDER = {meal_type: index for index, meal_type in enumerate(MealType.values)}


def _menu_cache_key(day: str) -> str:
    return f'today-menu:{day}'


def day_of_week(value: date) -> str:
    """Weekday name as stored on templates, e.g. 'Monday'."""
    return DayOfWeek.values[value.weekday()]


def list_menu_templates() -> List[WeeklyMenuTemplate]:
    """All templates ordered Monday..Sunday, breakfast..dinner."""
    templates = WeeklyMenuTemplate.objects.all()
    return sorted(
        templates,
        key=lambda t: (DAY_ORDER.get(t.day_of_week, 99), MEAL_ORDER.get(t.meal_type, 99)),
    )


@transaction.atomic
def update_menu_template(
    *,
    day: str,
    meal_type: str,
    main_dish: str,
    description: str = ''
) -> WeeklyMenuTemplate:
    """
    Set the dish served for a meal on a weekday.

    Raises:
        MenuValidationError: If the main dish is blank
        MenuTemplateNotFoundError: If the (day, meal type) row is missing
    """
    main_dish = (main_dish or '').strip()
    if not main_dish:
        raise MenuValidationError("Please enter a main dish")

    try:
        template = WeeklyMenuTemplate.objects.select_for_update().get(
            day_of_week=day,
            meal_type=meal_type,
        )
    except WeeklyMenuTemplate.DoesNotExist:
        raise MenuTemplateNotFoundError(f"No menu entry for {day} {meal_type}")

    template.main_dish = main_dish
    template.description = (description or '').strip()
    template.save(update_fields=['main_dish', 'description', 'updated_at'])

    cache.delete(_menu_cache_key(day))
    logger.info("Menu for %s %s set to %r", day, meal_type, main_dish)
    return template


def get_menu_for_day(*, day: str) -> Dict[str, dict]:
    """
    Menu of one weekday, keyed by meal type.

    Every meal type is present. A meal with no template row, or whose
    template still holds the placeholder dish, maps to
    ``{'meal_type': ..., 'configured': False}``.
    """
    key = _menu_cache_key(day)
    menu = cache.get(key)
    if menu is not None:
        return menu

    templates = {
        t.meal_type: t
        for t in WeeklyMenuTemplate.objects.filter(day_of_week=day)
    }

    menu = {}
    for meal_type in MealType.values:
        template = templates.get(meal_type)
        if template is None or not template.is_configured:
            menu[meal_type] = {'meal_type': meal_type, 'configured': False}
        else:
            menu[meal_type] = {
                'meal_type': meal_type,
                'configured': True,
                'main_dish': template.main_dish,
                'description': template.description,
            }

    cache.set(key, menu)
    return menu


def get_todays_menu(*, today: Optional[date] = None) -> dict:
    day = day_of_week(today or timezone.localdate())
    return {'day': day, 'meals': get_menu_for_day(day=day)}
