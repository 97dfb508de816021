"""
Domain-specific exceptions for the students app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class StudentsServiceError(Exception):
    """Base exception for all students service errors."""
    pass


class StudentNotFoundError(StudentsServiceError):
    """Raised when a student does not exist or is not linked to the user."""
    pass


class EmptySearchError(StudentsServiceError):
    """Raised when a search is issued without a student code."""
    pass
