from django.conf import settings
from rest_framework import serializers


class NotificationPreferencesSerializer(serializers.Serializer):
    sound_enabled = serializers.BooleanField(required=False)
    toast_enabled = serializers.BooleanField(required=False)


class EventsQuerySerializer(serializers.Serializer):
    wait = serializers.IntegerField(min_value=0, max_value=settings.NOTIFICATION_MAX_WAIT, default=0)


class NoticeSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    title = serializers.CharField()
    description = serializers.CharField()
    duration_ms = serializers.IntegerField()
    dismissible = serializers.BooleanField()
    created_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField()


class EventFrameSerializer(serializers.Serializer):
    """One client frame: tone, notice or invalidate."""

    type = serializers.ChoiceField(choices=['tone', 'notice', 'invalidate'])
