"""
Fixtures shared by every app's tests: one user per role, JWT clients and
students.
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, RoleAssignment, UserRole
from apps.students.models import Student, StudentStatus, Sex


@pytest.fixture(autouse=True)
def clear_cache():
    """Cached reads must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def close_notifiers():
    from apps.notifications.sessions import notifier_registry

    yield
    notifier_registry.close_all()


def _make_user(email, role, **extra):
    user = User.objects.create_user(
        email=email,
        password='TestPass123!',
        **extra
    )
    RoleAssignment.objects.create(user=user, role=role)
    return user


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    return _make_user('admin@example.com', UserRole.ADMIN, full_name='Admin User')


@pytest.fixture
def staff_user(db):
    return _make_user('staff@example.com', UserRole.STAFF, full_name='Staff User')


@pytest.fixture
def student_user(db):
    return _make_user('student@example.com', UserRole.STUDENT, full_name='Student User')


@pytest.fixture
def student(db, student_user):
    """Active student linked to ``student_user``."""
    return Student.objects.create(
        student_id='STU00001',
        full_name='Alice Example',
        grade='10',
        sex=Sex.FEMALE,
        status=StudentStatus.ACTIVE,
        user=student_user,
    )


@pytest.fixture
def other_student(db):
    """Active student without an account."""
    return Student.objects.create(
        student_id='STU00002',
        full_name='Bob Example',
        grade='11',
        sex=Sex.MALE,
        status=StudentStatus.ACTIVE,
    )


@pytest.fixture
def suspended_student(db):
    return Student.objects.create(
        student_id='STU00003',
        full_name='Carol Example',
        grade='9',
        sex=Sex.FEMALE,
        status=StudentStatus.SUSPENDED,
    )


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def student_client(student_user, student):
    """Client of a student user with a linked student record."""
    return _client_for(student_user)
