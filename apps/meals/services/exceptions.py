"""
Domain-specific exceptions for the meals app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class MealsServiceError(Exception):
    """Base exception for all meals service errors."""
    pass


class StudentNotActiveError(MealsServiceError):
    """Raised when recording a meal for a suspended or under-standard student."""
    pass


class DuplicateMealError(MealsServiceError):
    """Raised when the meal was already recorded for that student, date and type."""
    pass


class MealRecordingError(MealsServiceError):
    """Raised when the store rejects a meal record for any other reason."""
    pass


class MenuValidationError(MealsServiceError):
    """Raised when a menu template update is invalid."""
    pass


class MenuTemplateNotFoundError(MealsServiceError):
    """Raised when no template row exists for a weekday and meal type."""
    pass


class ScheduleNotFoundError(MealsServiceError):
    """Raised when a meal schedule does not exist."""
    pass


class InvalidScheduleError(MealsServiceError):
    """Raised when a serving window ends before it starts."""
    pass
