import pytest
from django.urls import reverse
from rest_framework import status

from apps.announcements.services import create_announcement
from apps.notifications.sessions import notifier_registry


@pytest.mark.django_db
class TestPreferencesApi:
    """Tests for /api/notifications/preferences/"""

    def test_defaults(self, student_client):
        response = student_client.get(reverse('notifications:preferences'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'sound_enabled': True, 'toast_enabled': True}

    def test_toggle_survives_reload(self, student_client):
        response = student_client.post(reverse('notifications:toggle-sound'))
        assert response.data['sound_enabled'] is False

        # A later request on the same device reads the stored value
        response = student_client.get(reverse('notifications:preferences'))
        assert response.data == {'sound_enabled': False, 'toast_enabled': True}

    def test_patch(self, staff_client):
        response = staff_client.patch(
            reverse('notifications:preferences'),
            {'toast_enabled': False},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'sound_enabled': True, 'toast_enabled': False}

    def test_toggle_toast_twice(self, student_client):
        student_client.post(reverse('notifications:toggle-toast'))
        response = student_client.post(reverse('notifications:toggle-toast'))

        assert response.data['toast_enabled'] is True

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('notifications:preferences'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestRealtimeApi:
    """Tests for connect / events / notices / disconnect"""

    def test_events_after_announcement(self, student_client, student_user, staff_user,
                                       django_capture_on_commit_callbacks):
        response = student_client.post(reverse('notifications:connect'))
        assert response.status_code == status.HTTP_201_CREATED

        with django_capture_on_commit_callbacks(execute=True):
            create_announcement(
                title='Sports day',
                content='No classes on Friday afternoon.',
                posted_by=staff_user,
            )

        response = student_client.get(reverse('notifications:events'))

        assert response.status_code == status.HTTP_200_OK
        assert [f['type'] for f in response.data['events']] == ['tone', 'notice', 'invalidate']

        response = student_client.get(reverse('notifications:notices'))
        assert [n['description'] for n in response.data] == ['Sports day']

    def test_muted_device_gets_only_invalidate(self, student_client, staff_user,
                                               django_capture_on_commit_callbacks):
        student_client.post(reverse('notifications:toggle-sound'))
        student_client.post(reverse('notifications:toggle-toast'))
        student_client.post(reverse('notifications:connect'))

        with django_capture_on_commit_callbacks(execute=True):
            create_announcement(
                title='Quiet one',
                content='Nothing to hear here.',
                posted_by=staff_user,
            )

        response = student_client.get(reverse('notifications:events'))

        assert [f['type'] for f in response.data['events']] == ['invalidate']

    def test_dismiss_notice(self, student_client, staff_user, django_capture_on_commit_callbacks):
        student_client.post(reverse('notifications:connect'))
        with django_capture_on_commit_callbacks(execute=True):
            create_announcement(
                title='Sports day',
                content='No classes on Friday afternoon.',
                posted_by=staff_user,
            )
        student_client.get(reverse('notifications:events'))
        notice_id = student_client.get(reverse('notifications:notices')).data[0]['id']

        url = reverse('notifications:dismiss-notice', kwargs={'notice_id': notice_id})
        response = student_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert student_client.get(reverse('notifications:notices')).data == []
        assert student_client.post(url).status_code == status.HTTP_404_NOT_FOUND

    def test_reconnect_keeps_single_session(self, student_client, student_user):
        student_client.post(reverse('notifications:connect'))
        first = notifier_registry.get(student_user.id)
        student_client.post(reverse('notifications:connect'))

        assert first.closed
        assert notifier_registry.get(student_user.id) is not first

    def test_disconnect(self, student_client, student_user):
        student_client.post(reverse('notifications:connect'))

        response = student_client.post(reverse('notifications:disconnect'))

        assert response.status_code == status.HTTP_200_OK
        assert notifier_registry.get(student_user.id) is None

    def test_invalid_wait(self, student_client):
        response = student_client.get(reverse('notifications:events'), {'wait': 60})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_wait_capped_by_setting(self, student_client, settings):
        response = student_client.get(
            reverse('notifications:events'),
            {'wait': settings.NOTIFICATION_MAX_WAIT + 1},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_staff_cannot_connect(self, staff_client):
        response = staff_client.post(reverse('notifications:connect'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
