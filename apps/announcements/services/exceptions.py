"""Domain exceptions for the announcements app."""


class AnnouncementsServiceError(Exception):
    """Base exception for announcement services."""
    pass


class AnnouncementNotFoundError(AnnouncementsServiceError):
    """Raised when an announcement does not exist."""
    pass
