"""Student lookups used by staff search and student self-service."""

from apps.accounts.models import User
from apps.students.models import Student

from .exceptions import StudentNotFoundError, EmptySearchError


def find_student_by_code(*, code: str) -> Student:
    """
    Find a student by their human-facing code.

    Codes are matched upper-cased, so ``stu00001`` finds ``STU00001``.

    Raises:
        EmptySearchError: If the code is blank
        StudentNotFoundError: If no student has the code
    """
    code = (code or '').strip()
    if not code:
        raise EmptySearchError("Please enter a student ID")

    try:
        return Student.objects.get(student_id=code.upper())
    except Student.DoesNotExist:
        raise StudentNotFoundError("Student not found")


def get_student_for_user(*, user: User) -> Student:
    """
    Return the student record linked to an authenticated user.

    Raises:
        StudentNotFoundError: If the user has no student record
    """
    try:
        return Student.objects.get(user=user)
    except Student.DoesNotExist:
        raise StudentNotFoundError("No student record is linked to this account")
