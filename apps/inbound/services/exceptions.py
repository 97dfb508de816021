"""Domain exceptions for inbound email processing."""


class InboundServiceError(Exception):
    """Base exception for inbound email services."""
    pass


class InvalidSignatureError(InboundServiceError):
    """Raised when a webhook signature is missing, stale or wrong."""
    pass
