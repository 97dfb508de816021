from rest_framework import serializers

from apps.students.models import Student

from .models import MealRecord, MealSchedule, WeeklyMenuTemplate, MealType, DayOfWeek


class StudentBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Student
        fields = ['id', 'student_id', 'full_name']
        read_only_fields = fields


class MealRecordSerializer(serializers.ModelSerializer):
    """Meal record for staff screens."""

    class Meta:
        model = MealRecord
        fields = ['id', 'student', 'meal_type', 'meal_date', 'recorded_by', 'created_at']
        read_only_fields = fields


class RecentMealSerializer(serializers.ModelSerializer):
    """Meal record with its student, for reports."""

    student = StudentBriefSerializer(read_only=True)

    class Meta:
        model = MealRecord
        fields = ['id', 'student', 'meal_type', 'meal_date', 'created_at']
        read_only_fields = fields


class RecordMealSerializer(serializers.Serializer):
    """Input for recording a meal."""

    student = serializers.UUIDField()
    meal_type = serializers.ChoiceField(choices=MealType.choices)


class TodaysMealsQuerySerializer(serializers.Serializer):
    student = serializers.UUIDField()


class MealHistoryDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    breakfast = serializers.BooleanField()
    lunch = serializers.BooleanField()
    dinner = serializers.BooleanField()


class WeeklyMenuTemplateSerializer(serializers.ModelSerializer):
    configured = serializers.BooleanField(source='is_configured', read_only=True)

    class Meta:
        model = WeeklyMenuTemplate
        fields = ['id', 'day_of_week', 'meal_type', 'main_dish', 'description', 'configured', 'updated_at']
        read_only_fields = fields


class MenuUpdateSerializer(serializers.Serializer):
    """Input for updating one menu template."""

    main_dish = serializers.CharField(max_length=200, allow_blank=True, trim_whitespace=True)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class MenuPathSerializer(serializers.Serializer):
    day = serializers.ChoiceField(choices=DayOfWeek.choices)
    meal_type = serializers.ChoiceField(choices=MealType.choices)


class MenuEntrySerializer(serializers.Serializer):
    meal_type = serializers.CharField()
    configured = serializers.BooleanField()
    main_dish = serializers.CharField(required=False)
    description = serializers.CharField(required=False)


class TodaysMenuSerializer(serializers.Serializer):
    day = serializers.CharField()
    meals = serializers.DictField(child=MenuEntrySerializer())


class MealScheduleSerializer(serializers.ModelSerializer):
    class Meta:
        model = MealSchedule
        fields = ['id', 'meal_type', 'start_time', 'end_time', 'updated_at']
        read_only_fields = ['id', 'meal_type', 'updated_at']


class MealStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    breakfast = serializers.IntegerField()
    lunch = serializers.IntegerField()
    dinner = serializers.IntegerField()


class MealReportSerializer(serializers.Serializer):
    stats = MealStatsSerializer()
    recent = RecentMealSerializer(many=True)
