from rest_framework import serializers

from .models import Student, StudentStatus, Sex


class StudentSerializer(serializers.ModelSerializer):
    """Full student record."""

    has_account = serializers.SerializerMethodField()

    class Meta:
        model = Student
        fields = [
            'id',
            'student_id',
            'full_name',
            'grade',
            'sex',
            'status',
            'has_account',
            'last_checked_announcements',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_has_account(self, obj):
        return obj.user_id is not None


class StudentInputSerializer(serializers.Serializer):
    """Validated input for creating or updating a student."""

    full_name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={'min_length': 'Name must be at least 2 characters'},
    )
    grade = serializers.CharField(
        min_length=1,
        max_length=20,
        error_messages={'blank': 'Grade is required'},
    )
    sex = serializers.ChoiceField(choices=Sex.choices)
    status = serializers.ChoiceField(choices=StudentStatus.choices)


class StudentSearchSerializer(serializers.Serializer):
    """Query parameters for staff search."""

    student_id = serializers.CharField(required=False, allow_blank=True, default='')
