import json
import time

import pytest

from apps.inbound.services import sign

# base64 of b'test-webhook-secret'
WEBHOOK_SECRET = 'whsec_dGVzdC13ZWJob29rLXNlY3JldA=='


@pytest.fixture
def received_event():
    return {
        'type': 'email.received',
        'data': {
            'email_id': 'em_123',
            'from': 'parent@example.com',
            'to': ['support@school.example'],
            'subject': 'Lunch allergy question',
        },
    }


@pytest.fixture
def webhook_secret(settings):
    settings.RESEND_WEBHOOK_SECRET = WEBHOOK_SECRET
    return WEBHOOK_SECRET


@pytest.fixture
def signed_headers(webhook_secret):
    """Build svix headers for a JSON payload."""
    def _headers(payload, secret=webhook_secret, timestamp=None):
        body = json.dumps(payload).encode()
        timestamp = str(timestamp or int(time.time()))
        signature = sign(secret, 'msg_1', timestamp, body)
        return body, {
            'HTTP_SVIX_ID': 'msg_1',
            'HTTP_SVIX_TIMESTAMP': timestamp,
            'HTTP_SVIX_SIGNATURE': f'v1,{signature}',
        }
    return _headers
