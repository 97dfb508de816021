"""
Meal reports for the admin dashboard.

Read-only aggregate queries; nothing here modifies data.
"""

from django.conf import settings
from django.core.cache import cache
from django.db.models import Count, Q

from apps.meals.models import MealRecord, MealType

MEAL_STATS_CACHE_KEY = 'meal-stats'


class MealReportQueries:
    """
    Aggregate queries over meal records.

    Methods:
        meal_stats: Total meals served, overall and per meal type.
        recent_meals: Latest records with their students.
    """

    @staticmethod
    def meal_stats():
        """
        Count meal records overall and per meal type.

        Returns:
            dict: {'total': int, 'breakfast': int, 'lunch': int, 'dinner': int}
        """
        cached = cache.get(MEAL_STATS_CACHE_KEY)
        if cached is not None:
            return cached

        aggregates = {
            meal_type: Count('id', filter=Q(meal_type=meal_type))
            for meal_type in MealType.values
        }
        stats = MealRecord.objects.aggregate(total=Count('id'), **aggregates)

        cache.set(MEAL_STATS_CACHE_KEY, stats)
        return stats

    @staticmethod
    def recent_meals(limit=None):
        """Return the most recently recorded meals, newest first."""
        limit = limit or settings.RECENT_MEALS_LIMIT
        return (
            MealRecord.objects
            .select_related('student', 'recorded_by')
            .order_by('-created_at')[:limit]
        )
