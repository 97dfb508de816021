"""
Students app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    StudentsServiceError,
    StudentNotFoundError,
    EmptySearchError,
)

from .student_management import (
    generate_student_id,
    create_student,
    get_student_by_id,
    update_student,
    delete_student,
)

from .student_lookup import (
    find_student_by_code,
    get_student_for_user,
)


__all__ = [
    # Exceptions
    'StudentsServiceError',
    'StudentNotFoundError',
    'EmptySearchError',

    # Student Management
    'generate_student_id',
    'create_student',
    'get_student_by_id',
    'update_student',
    'delete_student',

    # Lookups
    'find_student_by_code',
    'get_student_for_user',
]
