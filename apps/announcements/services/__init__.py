"""
Announcements app services layer.
"""

from .exceptions import (
    AnnouncementsServiceError,
    AnnouncementNotFoundError,
)

from .announcement_management import (
    list_announcements,
    get_announcement,
    create_announcement,
    update_announcement,
    delete_announcement,
)


__all__ = [
    # Exceptions
    'AnnouncementsServiceError',
    'AnnouncementNotFoundError',

    # Announcement Management
    'list_announcements',
    'get_announcement',
    'create_announcement',
    'update_announcement',
    'delete_announcement',
]
