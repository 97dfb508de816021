from django.apps import AppConfig


class AnnouncementsConfig(AppConfig):
    name = 'apps.announcements'
    label = 'announcements'
    verbose_name = 'Announcements'

    def ready(self):
        from . import signals  # noqa: F401
