import logging

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
)
from rest_framework.exceptions import ParseError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .services import (
    EMAIL_RECEIVED,
    verify_signature,
    process_received_email,
    InvalidSignatureError,
)

logger = logging.getLogger(__name__)


@extend_schema(
    request=None,
    description="Webhook for inbound email events from the mail provider.",
    tags=['webhooks'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def receive_email(request):
    """
    Accept an email provider event.

    Signatures are checked only when RESEND_WEBHOOK_SECRET is configured.
    """
    logger.info("Received webhook request")

    secret = settings.RESEND_WEBHOOK_SECRET
    if secret:
        try:
            verify_signature(secret=secret, headers=request.headers, body=request.body)
        except InvalidSignatureError as e:
            logger.warning("Rejected webhook: %s", e)
            return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    try:
        event = request.data
    except ParseError as e:
        logger.error("Error processing webhook: %s", e)
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not isinstance(event, dict):
        return Response({'error': 'Invalid event payload'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    event_type = event.get('type')
    logger.info("Event type: %s", event_type)

    if event_type == EMAIL_RECEIVED:
        process_received_email(event.get('data') or {})
        return Response({'success': True, 'message': 'Email received and processed'})

    return Response({'success': True, 'message': 'Event received'})
