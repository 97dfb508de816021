import pytest

from apps.accounts.models import User, RoleAssignment, UserRole
from apps.students.models import Student, StudentStatus, Sex


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive student user."""
    user = User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        full_name='Inactive User',
        is_active=False,
    )
    RoleAssignment.objects.create(user=user, role=UserRole.STUDENT)
    return user


@pytest.fixture
def unlinked_student(db):
    """Student record waiting to be claimed at sign-up."""
    return Student.objects.create(
        student_id='STU00010',
        full_name='Dana Example',
        grade='12',
        sex=Sex.OTHER,
        status=StudentStatus.ACTIVE,
    )


@pytest.fixture
def registration_data():
    return {
        'email': 'newuser@example.com',
        'password': 'secret1',
        'full_name': 'New User',
    }
