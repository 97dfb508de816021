import json

import pytest
from unittest.mock import patch

from django.db import OperationalError
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestHealthCheck:

    def test_ok(self, client):
        response = client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert json.loads(response.content) == {'status': 'ok', 'database': 'ok'}

    def test_database_error_text_is_not_exposed(self, client, caplog):
        error = OperationalError('password authentication failed for user "meals"')

        with patch('django.db.backends.base.base.BaseDatabaseWrapper.cursor', side_effect=error):
            response = client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert json.loads(response.content) == {'status': 'error', 'database': 'unavailable'}
        assert 'password' not in response.content.decode()
        assert 'could not reach the database' in caplog.text
