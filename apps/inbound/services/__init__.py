"""
Inbound app services layer.
"""

from .exceptions import (
    InboundServiceError,
    InvalidSignatureError,
)

from .signature import (
    sign,
    verify_signature,
)

from .email_processing import (
    EMAIL_RECEIVED,
    route_for_recipient,
    fetch_email,
    process_received_email,
)


__all__ = [
    # Exceptions
    'InboundServiceError',
    'InvalidSignatureError',

    # Signature
    'sign',
    'verify_signature',

    # Email Processing
    'EMAIL_RECEIVED',
    'route_for_recipient',
    'fetch_email',
    'process_received_email',
]
