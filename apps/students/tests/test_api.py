import pytest
from django.urls import reverse
from rest_framework import status

from apps.students.models import Student


@pytest.mark.django_db
class TestStudentAdministration:
    """Tests for /api/students/ (admin only)"""

    def test_list_students_newest_first(self, admin_client, student, other_student):
        response = admin_client.get(reverse('students:student-list'))

        assert response.status_code == status.HTTP_200_OK
        codes = [s['student_id'] for s in response.data]
        assert codes == ['STU00002', 'STU00001']

    def test_staff_cannot_list_students(self, staff_client):
        response = staff_client.get(reverse('students:student-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_student(self, admin_client, student_payload):
        response = admin_client.post(
            reverse('students:student-list'), student_payload, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['student_id'] == 'STU00001'
        assert response.data['has_account'] is False

    def test_create_student_short_name(self, admin_client, student_payload):
        data = {**student_payload, 'full_name': 'E'}
        response = admin_client.post(reverse('students:student-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'full_name' in response.data
        assert Student.objects.count() == 0

    def test_create_student_invalid_status(self, admin_client, student_payload):
        data = {**student_payload, 'status': 'expelled'}
        response = admin_client.post(reverse('students:student-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_partial_update_keeps_other_fields(self, admin_client, other_student):
        url = reverse('students:student-detail', kwargs={'pk': other_student.pk})
        response = admin_client.patch(url, {'status': 'suspended'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'suspended'
        assert response.data['full_name'] == other_student.full_name

    def test_delete_student(self, admin_client, other_student):
        url = reverse('students:student-detail', kwargs={'pk': other_student.pk})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Student.objects.filter(pk=other_student.pk).exists()


@pytest.mark.django_db
class TestStudentSearch:
    """Tests for GET /api/students/search/"""

    def test_search_lowercase_code(self, staff_client, student):
        url = reverse('students:student-search')
        response = staff_client.get(url, {'student_id': 'stu00001'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(student.id)

    def test_search_unknown_code(self, staff_client, student):
        url = reverse('students:student-search')
        response = staff_client.get(url, {'student_id': 'STU12345'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Student not found'

    def test_search_empty_code(self, staff_client):
        url = reverse('students:student-search')
        response = staff_client.get(url, {'student_id': ''})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Please enter a student ID'

    def test_admin_can_search(self, admin_client, student):
        url = reverse('students:student-search')
        response = admin_client.get(url, {'student_id': 'STU00001'})

        assert response.status_code == status.HTTP_200_OK

    def test_student_cannot_search(self, student_client):
        url = reverse('students:student-search')
        response = student_client.get(url, {'student_id': 'STU00001'})

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestMyProfile:
    """Tests for GET /api/students/me/"""

    def test_profile(self, student_client, student):
        response = student_client.get(reverse('students:my-profile'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['student_id'] == student.student_id
        assert response.data['has_account'] is True

    def test_profile_without_linked_record(self, staff_client):
        response = staff_client.get(reverse('students:my-profile'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
