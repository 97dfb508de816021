"""
Service layer unit tests for inbound email processing.
"""

import pytest
from unittest.mock import patch, Mock

import requests

from apps.inbound.services import (
    sign,
    verify_signature,
    route_for_recipient,
    fetch_email,
    process_received_email,
)
from apps.inbound.services.exceptions import InvalidSignatureError

from .conftest import WEBHOOK_SECRET


class TestSignature:

    def _headers(self, body, timestamp='1715000000', secret=WEBHOOK_SECRET):
        return {
            'svix-id': 'msg_1',
            'svix-timestamp': timestamp,
            'svix-signature': f'v1,{sign(secret, "msg_1", timestamp, body)}',
        }

    def test_valid_signature(self):
        body = b'{"type": "email.received"}'

        verify_signature(secret=WEBHOOK_SECRET, headers=self._headers(body), body=body, now=1715000000)

    def test_any_listed_signature_may_match(self):
        body = b'{}'
        headers = self._headers(body)
        headers['svix-signature'] = 'v1,bogus ' + headers['svix-signature']

        verify_signature(secret=WEBHOOK_SECRET, headers=headers, body=body, now=1715000000)

    def test_tampered_body(self):
        headers = self._headers(b'{"a": 1}')

        with pytest.raises(InvalidSignatureError, match="Invalid webhook signature"):
            verify_signature(secret=WEBHOOK_SECRET, headers=headers, body=b'{"a": 2}', now=1715000000)

    def test_wrong_secret(self):
        body = b'{}'
        headers = self._headers(body, secret='whsec_b3RoZXItc2VjcmV0')

        with pytest.raises(InvalidSignatureError):
            verify_signature(secret=WEBHOOK_SECRET, headers=headers, body=body, now=1715000000)

    def test_stale_timestamp(self):
        body = b'{}'

        with pytest.raises(InvalidSignatureError, match="tolerance"):
            verify_signature(
                secret=WEBHOOK_SECRET,
                headers=self._headers(body),
                body=body,
                now=1715000000 + 301,
            )

    def test_missing_headers(self):
        with pytest.raises(InvalidSignatureError, match="Missing"):
            verify_signature(secret=WEBHOOK_SECRET, headers={}, body=b'{}')


class TestRouting:

    @pytest.mark.parametrize('recipient, route', [
        ('support@school.example', 'support'),
        ('noreply@school.example', 'noreply'),
        ('principal@school.example', 'general'),
        ('', 'general'),
    ])
    def test_route_for_recipient(self, recipient, route):
        assert route_for_recipient(recipient) == route

    def test_routes_by_first_recipient(self):
        data = {'to': ['noreply@school.example', 'support@school.example']}

        assert process_received_email(data) == 'noreply'

    def test_missing_recipients(self):
        assert process_received_email({}) == 'general'


class TestFetchEmail:

    def test_no_api_key_skips_fetch(self, settings):
        settings.RESEND_API_KEY = ''

        with patch('apps.inbound.services.email_processing.requests.get') as mock_get:
            assert fetch_email('em_123') is None

        mock_get.assert_not_called()

    def test_fetch_uses_bearer_token(self, settings):
        settings.RESEND_API_KEY = 're_test'
        settings.RESEND_API_BASE = 'https://api.resend.com'
        response = Mock(ok=True)
        response.json.return_value = {'id': 'em_123', 'text': 'Hello'}

        with patch('apps.inbound.services.email_processing.requests.get', return_value=response) as mock_get:
            email = fetch_email('em_123')

        assert email == {'id': 'em_123', 'text': 'Hello'}
        mock_get.assert_called_once_with(
            'https://api.resend.com/emails/em_123',
            headers={'Authorization': 'Bearer re_test'},
            timeout=10,
        )

    def test_fetch_error_status_is_logged(self, settings, caplog):
        settings.RESEND_API_KEY = 're_test'
        response = Mock(ok=False, text='not found')

        with patch('apps.inbound.services.email_processing.requests.get', return_value=response):
            assert fetch_email('em_404') is None

        assert 'Failed to fetch email content' in caplog.text

    def test_network_error_is_swallowed(self, settings):
        settings.RESEND_API_KEY = 're_test'

        with patch(
            'apps.inbound.services.email_processing.requests.get',
            side_effect=requests.ConnectionError("down"),
        ):
            assert fetch_email('em_123') is None
