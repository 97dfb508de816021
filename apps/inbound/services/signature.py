"""
Verification of Svix-style webhook signatures.

The provider signs ``"{svix-id}.{svix-timestamp}.{raw body}"`` with
HMAC-SHA256 keyed by the base64 secret (``whsec_`` prefix stripped) and
sends one or more space separated ``v1,<base64 digest>`` entries in the
``svix-signature`` header.
"""

import base64
import hashlib
import hmac
import time

from .exceptions import InvalidSignatureError

# Maximum clock skew accepted for svix-timestamp, in seconds
TIMESTAMP_TOLERANCE = 5 * 60

SECRET_PREFIX = 'whsec_'


def _secret_bytes(secret: str) -> bytes:
    if secret.startswith(SECRET_PREFIX):
        secret = secret[len(SECRET_PREFIX):]
    try:
        return base64.b64decode(secret, validate=True)
    except ValueError:
        return secret.encode()


def sign(secret: str, message_id: str, timestamp: str, body: bytes) -> str:
    """Return the base64 digest the provider would send for this payload."""
    signed = f'{message_id}.{timestamp}.'.encode() + body
    digest = hmac.new(_secret_bytes(secret), signed, hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def verify_signature(*, secret: str, headers, body: bytes, now=None) -> None:
    """
    Check the svix headers of a webhook request.

    Raises:
        InvalidSignatureError: If a header is missing, the timestamp is
            outside the tolerance, or no signature matches
    """
    message_id = headers.get('svix-id')
    timestamp = headers.get('svix-timestamp')
    signatures = headers.get('svix-signature')
    if not (message_id and timestamp and signatures):
        raise InvalidSignatureError("Missing webhook signature headers")

    try:
        sent_at = int(timestamp)
    except ValueError:
        raise InvalidSignatureError("Invalid webhook timestamp")

    now = int(now if now is not None else time.time())
    if abs(now - sent_at) > TIMESTAMP_TOLERANCE:
        raise InvalidSignatureError("Webhook timestamp outside tolerance")

    expected = sign(secret, message_id, timestamp, body)
    for entry in signatures.split():
        version, _, value = entry.partition(',')
        if version == 'v1' and hmac.compare_digest(value, expected):
            return

    raise InvalidSignatureError("Invalid webhook signature")
