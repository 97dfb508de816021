from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer

from .models import Announcement


class AnnouncementSerializer(serializers.ModelSerializer):
    """Announcement as shown to staff."""

    posted_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Announcement
        fields = ['id', 'title', 'content', 'posted_by', 'created_at', 'updated_at']
        read_only_fields = fields


class StudentAnnouncementSerializer(serializers.ModelSerializer):
    """Announcement with the requesting student's unread flag."""

    is_unread = serializers.SerializerMethodField()

    class Meta:
        model = Announcement
        fields = ['id', 'title', 'content', 'created_at', 'is_unread']
        read_only_fields = fields

    def get_is_unread(self, obj) -> bool:
        return obj.id in self.context.get('unread_ids', set())


class AnnouncementInputSerializer(serializers.Serializer):
    """Create/update input. Both fields are trimmed before length checks."""

    title = serializers.CharField(
        min_length=3,
        max_length=200,
        error_messages={'min_length': 'Title must be at least 3 characters'},
    )
    content = serializers.CharField(
        min_length=10,
        max_length=1000,
        error_messages={'min_length': 'Content must be at least 10 characters'},
    )


class UnreadCountSerializer(serializers.Serializer):
    unread_count = serializers.IntegerField()


class MarkReadSerializer(serializers.Serializer):
    message = serializers.CharField()
    last_checked_announcements = serializers.DateTimeField()
