"""Seed one menu template per (weekday, meal type) and default serving times."""

import datetime

from django.db import migrations


DAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']

DEFAULT_SCHEDULES = {
    'breakfast': (datetime.time(7, 0), datetime.time(9, 0)),
    'lunch': (datetime.time(12, 0), datetime.time(14, 0)),
    'dinner': (datetime.time(18, 0), datetime.time(20, 0)),
}


def seed(apps, schema_editor):
    WeeklyMenuTemplate = apps.get_model('meals', 'WeeklyMenuTemplate')
    MealSchedule = apps.get_model('meals', 'MealSchedule')

    for day in DAYS:
        for meal_type in DEFAULT_SCHEDULES:
            WeeklyMenuTemplate.objects.get_or_create(
                day_of_week=day,
                meal_type=meal_type,
                defaults={'main_dish': 'Not set'},
            )

    for meal_type, (start, end) in DEFAULT_SCHEDULES.items():
        MealSchedule.objects.get_or_create(
            meal_type=meal_type,
            defaults={'start_time': start, 'end_time': end},
        )


def unseed(apps, schema_editor):
    apps.get_model('meals', 'WeeklyMenuTemplate').objects.all().delete()
    apps.get_model('meals', 'MealSchedule').objects.all().delete()


class Migration(migrations.Migration):

    dependencies = [
        ('meals', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed, unseed),
    ]
