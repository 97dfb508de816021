"""
Student management service.

Handles student CRUD operations with transaction safety. Student codes are
generated here and retried on collision.
"""

import logging
import re
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.students.models import Student

from .exceptions import StudentNotFoundError

logger = logging.getLogger(__name__)

STUDENT_CODE_PREFIX = 'STU'
_CODE_RE = re.compile(rf'^{STUDENT_CODE_PREFIX}(\d+)$')


def generate_student_id() -> str:
    """
    Return the next free student code (STU00001, STU00002, ...).

    The number follows the highest code in use, so codes of deleted
    students are never handed out again while a higher code exists.
    """
    highest = 0
    codes = Student.objects.filter(
        student_id__startswith=STUDENT_CODE_PREFIX
    ).values_list('student_id', flat=True)
    for code in codes:
        match = _CODE_RE.match(code)
        if match:
            highest = max(highest, int(match.group(1)))
    return f'{STUDENT_CODE_PREFIX}{highest + 1:05d}'


def create_student(
    *,
    full_name: str,
    grade: str,
    sex: str,
    status: str,
    max_retries: int = 5
) -> Student:
    """
    Create a student with a freshly generated code.

    Raises:
        RuntimeError: If no unique code could be generated after retries
    """
    for attempt in range(max_retries):
        student_id = generate_student_id()

        try:
            # Each attempt is a separate transaction
            with transaction.atomic():
                student = Student.objects.create(
                    student_id=student_id,
                    full_name=full_name,
                    grade=grade,
                    sex=sex,
                    status=status,
                )
                logger.info("Created student %s", student.student_id)
                return student

        except IntegrityError:
            # Another request took the same code
            if attempt == max_retries - 1:
                raise RuntimeError(
                    f"Failed to generate unique student ID after {max_retries} attempts"
                )
            continue


def get_student_by_id(*, student_pk: UUID) -> Student:
    try:
        return Student.objects.select_related('user').get(id=student_pk)
    except Student.DoesNotExist:
        raise StudentNotFoundError("Student not found")


@transaction.atomic
def update_student(
    *,
    student_pk: UUID,
    full_name: str,
    grade: str,
    sex: str,
    status: str
) -> Student:
    """Overwrite a student's editable fields."""
    try:
        student = Student.objects.select_for_update().get(id=student_pk)
    except Student.DoesNotExist:
        raise StudentNotFoundError("Student not found")

    student.full_name = full_name
    student.grade = grade
    student.sex = sex
    student.status = status
    student.save(update_fields=['full_name', 'grade', 'sex', 'status', 'updated_at'])

    return student


@transaction.atomic
def delete_student(*, student_pk: UUID) -> None:
    """Delete a student together with their meal records and dismissals."""
    deleted, _ = Student.objects.filter(id=student_pk).delete()
    if not deleted:
        raise StudentNotFoundError("Student not found")
    logger.info("Deleted student %s", student_pk)
