from django.contrib import admin

from .models import MealRecord, MealSchedule, WeeklyMenuTemplate


@admin.register(MealRecord)
class MealRecordAdmin(admin.ModelAdmin):
    """Admin interface for meal records."""

    list_display = ['student', 'meal_type', 'meal_date', 'recorded_by', 'created_at']
    list_filter = ['meal_type', 'meal_date']
    search_fields = ['student__student_id', 'student__full_name']
    readonly_fields = ['created_at']
    date_hierarchy = 'meal_date'

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('student', 'recorded_by')


@admin.register(MealSchedule)
class MealScheduleAdmin(admin.ModelAdmin):
    list_display = ['meal_type', 'start_time', 'end_time', 'updated_at']


@admin.register(WeeklyMenuTemplate)
class WeeklyMenuTemplateAdmin(admin.ModelAdmin):
    list_display = ['day_of_week', 'meal_type', 'main_dish', 'updated_at']
    list_filter = ['day_of_week', 'meal_type']
    search_fields = ['main_dish', 'description']
