"""
Handling of inbound email events.

Received emails are routed by their first recipient. Routing only logs for
now; when an API key is configured the full email is fetched from the
provider. Fetch problems are logged and never fail the webhook.
"""

import logging
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

EMAIL_RECEIVED = 'email.received'

ROUTE_SUPPORT = 'support'
ROUTE_NOREPLY = 'noreply'
ROUTE_GENERAL = 'general'


def route_for_recipient(recipient: str) -> str:
    if settings.SUPPORT_EMAIL_PREFIX in recipient:
        return ROUTE_SUPPORT
    if settings.NOREPLY_EMAIL_PREFIX in recipient:
        return ROUTE_NOREPLY
    return ROUTE_GENERAL


def fetch_email(email_id: str) -> Optional[dict]:
    """Full email from the provider API, or None when unavailable."""
    api_key = settings.RESEND_API_KEY
    if not api_key or not email_id:
        return None

    url = f"{settings.RESEND_API_BASE.rstrip('/')}/emails/{email_id}"
    try:
        response = requests.get(
            url,
            headers={'Authorization': f'Bearer {api_key}'},
            timeout=settings.RESEND_FETCH_TIMEOUT,
        )
    except requests.RequestException:
        logger.exception("Error fetching email content for %s", email_id)
        return None

    if not response.ok:
        logger.error("Failed to fetch email content for %s: %s", email_id, response.text)
        return None

    try:
        email = response.json()
    except ValueError:
        logger.error("Email content for %s is not JSON", email_id)
        return None

    logger.info("Full email content retrieved for %s", email_id)
    return email


def process_received_email(data: dict) -> str:
    """
    Route a received email and fetch its content.

    Returns:
        The route taken: support, noreply or general
    """
    recipients = data.get('to') or []
    if isinstance(recipients, str):
        recipients = [recipients]
    recipient = recipients[0] if recipients else ''

    logger.info(
        "Received email from %s to %s: %s (%s)",
        data.get('from'), recipient, data.get('subject'), data.get('email_id'),
    )

    route = route_for_recipient(recipient)
    if route == ROUTE_SUPPORT:
        logger.info("Support email received")
    elif route == ROUTE_NOREPLY:
        logger.info("Reply to no-reply address, likely an auto-reply or bounce")
    else:
        logger.info("General email received")

    fetch_email(data.get('email_id'))
    return route
