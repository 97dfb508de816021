from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    name = 'apps.notifications'
    label = 'notifications'
    verbose_name = 'Notifications'

    def ready(self):
        from django.contrib.auth.signals import user_logged_out

        from .sessions import notifier_registry

        def close_notifier(sender, request, user, **kwargs):
            if user is not None:
                notifier_registry.close(user.pk)

        user_logged_out.connect(close_notifier, weak=False, dispatch_uid='close_notifier_on_logout')
