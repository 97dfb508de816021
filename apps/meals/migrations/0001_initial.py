import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


MEAL_TYPES = [('breakfast', 'Breakfast'), ('lunch', 'Lunch'), ('dinner', 'Dinner')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('students', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='MealSchedule',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('meal_type', models.CharField(choices=MEAL_TYPES, max_length=20, unique=True)),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'meal_schedules',
                'ordering': ['meal_type'],
            },
        ),
        migrations.CreateModel(
            name='WeeklyMenuTemplate',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('day_of_week', models.CharField(choices=[('Monday', 'Monday'), ('Tuesday', 'Tuesday'), ('Wednesday', 'Wednesday'), ('Thursday', 'Thursday'), ('Friday', 'Friday'), ('Saturday', 'Saturday'), ('Sunday', 'Sunday')], max_length=10)),
                ('meal_type', models.CharField(choices=MEAL_TYPES, max_length=20)),
                ('main_dish', models.CharField(default='Not set', max_length=200)),
                ('description', models.TextField(blank=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'weekly_menu_templates',
                'unique_together': {('day_of_week', 'meal_type')},
            },
        ),
        migrations.CreateModel(
            name='MealRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('meal_type', models.CharField(choices=MEAL_TYPES, max_length=20)),
                ('meal_date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('recorded_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recorded_meals', to=settings.AUTH_USER_MODEL)),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='meals', to='students.student')),
            ],
            options={
                'db_table': 'meals',
                'ordering': ['-meal_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['meal_date', 'meal_type'], name='meals_date_type_idx'),
                    models.Index(fields=['created_at'], name='meals_created_at_idx'),
                ],
            },
        ),
        migrations.AddConstraint(
            model_name='mealrecord',
            constraint=models.UniqueConstraint(fields=('student', 'meal_date', 'meal_type'), name='unique_meal_per_student_day_type'),
        ),
    ]
