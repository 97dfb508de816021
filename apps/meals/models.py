# ==========================================
# apps/meals/models.py
# ==========================================

from django.db import models
import uuid


class MealType(models.TextChoices):
    BREAKFAST = 'breakfast', 'Breakfast'
    LUNCH = 'lunch', 'Lunch'
    DINNER = 'dinner', 'Dinner'


class DayOfWeek(models.TextChoices):
    MONDAY = 'Monday', 'Monday'
    TUESDAY = 'Tuesday', 'Tuesday'
    WEDNESDAY = 'Wednesday', 'Wednesday'
    THURSDAY = 'Thursday', 'Thursday'
    FRIDAY = 'Friday', 'Friday'
    SATURDAY = 'Saturday', 'Saturday'
    SUNDAY = 'Sunday', 'Sunday'


# Placeholder main dish of a template nobody has filled in yet
MENU_NOT_SET = 'Not set'


class MealRecord(models.Model):
    """One meal served to one student."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey('students.Student', on_delete=models.CASCADE, related_name='meals')
    meal_type = models.CharField(max_length=20, choices=MealType.choices)
    meal_date = models.DateField()
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='recorded_meals',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'meals'
        constraints = [
            models.UniqueConstraint(
                fields=['student', 'meal_date', 'meal_type'],
                name='unique_meal_per_student_day_type',
            ),
        ]
        indexes = [
            models.Index(fields=['meal_date', 'meal_type'], name='meals_date_type_idx'),
            models.Index(fields=['created_at'], name='meals_created_at_idx'),
        ]
        ordering = ['-meal_date', '-created_at']

    def __str__(self):
        return f"{self.student} - {self.meal_type} on {self.meal_date}"


class MealSchedule(models.Model):
    """Serving window of a meal type."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    meal_type = models.CharField(max_length=20, choices=MealType.choices, unique=True)
    start_time = models.TimeField()
    end_time = models.TimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'meal_schedules'
        ordering = ['meal_type']

    def __str__(self):
        return f"{self.meal_type}: {self.start_time:%H:%M}-{self.end_time:%H:%M}"


class WeeklyMenuTemplate(models.Model):
    """Recurring menu for one meal type on one weekday."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    day_of_week = models.CharField(max_length=10, choices=DayOfWeek.choices)
    meal_type = models.CharField(max_length=20, choices=MealType.choices)
    main_dish = models.CharField(max_length=200, default=MENU_NOT_SET)
    description = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'weekly_menu_templates'
        unique_together = [['day_of_week', 'meal_type']]

    def __str__(self):
        return f"{self.day_of_week} {self.meal_type}: {self.main_dish}"

    @property
    def is_configured(self):
        return bool(self.main_dish) and self.main_dish != MENU_NOT_SET
