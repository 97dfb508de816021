import pytest


@pytest.fixture
def student_payload():
    return {
        'full_name': 'Erin Example',
        'grade': '8',
        'sex': 'Female',
        'status': 'active',
    }
