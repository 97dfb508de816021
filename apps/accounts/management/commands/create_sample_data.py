"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 3 users (admin, staff, student) with their roles
- 6 students, one of them linked to the student account
- A filled-in weekly menu
- Meal records for the last few days
- Announcements
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from datetime import timedelta
import random

from apps.accounts.models import User, RoleAssignment, UserRole
from apps.announcements.models import Announcement, AnnouncementDismissal
from apps.meals.models import MealRecord, MealType, WeeklyMenuTemplate, DayOfWeek, MENU_NOT_SET
from apps.students.models import Student, StudentStatus, Sex
from apps.students.services import create_student


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        students = self.create_students(users['student'])
        self.create_menu()
        self.create_meals(students, users['staff'])
        self.create_announcements(users['staff'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (admin)')
        self.stdout.write('  staff@example.com / password123 (staff)')
        self.stdout.write('  student@example.com / password123 (student)')

    def clear_data(self):
        """Clear all data from the database. Seeded menu rows are reset, not deleted."""
        AnnouncementDismissal.objects.all().delete()
        Announcement.objects.all().delete()
        MealRecord.objects.all().delete()
        Student.objects.all().delete()
        WeeklyMenuTemplate.objects.update(main_dish=MENU_NOT_SET, description='')
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def _user(self, email, password, full_name, role, **extra):
        user, _ = User.objects.get_or_create(
            email=email,
            defaults={'full_name': full_name, **extra},
        )
        user.set_password(password)
        user.save()
        RoleAssignment.objects.update_or_create(user=user, defaults={'role': role})
        return user

    def create_users(self):
        self.stdout.write('  Creating users...')

        return {
            'admin': self._user(
                'admin@example.com', 'admin123', 'Admin User', UserRole.ADMIN,
                is_staff=True, is_superuser=True,
            ),
            'staff': self._user('staff@example.com', 'password123', 'Cafeteria Staff', UserRole.STAFF),
            'student': self._user('student@example.com', 'password123', 'Amara Okafor', UserRole.STUDENT),
        }

    def create_students(self, student_user):
        self.stdout.write('  Creating students...')

        students_data = [
            ('Amara Okafor', '10', Sex.FEMALE, StudentStatus.ACTIVE),
            ('Liam Novak', '10', Sex.MALE, StudentStatus.ACTIVE),
            ('Sofia Rossi', '11', Sex.FEMALE, StudentStatus.ACTIVE),
            ('Kenji Watanabe', '12', Sex.MALE, StudentStatus.SUSPENDED),
            ('Robin Meyer', '9', Sex.OTHER, StudentStatus.UNDER_STANDARD),
            ('Priya Shah', '11', Sex.FEMALE, StudentStatus.ACTIVE),
        ]

        students = []
        for full_name, grade, sex, status in students_data:
            student = Student.objects.filter(full_name=full_name).first()
            if student is None:
                student = create_student(full_name=full_name, grade=grade, sex=sex, status=status)
            students.append(student)

        linked = students[0]
        if linked.user_id is None:
            linked.user = student_user
            linked.save(update_fields=['user', 'updated_at'])

        return students

    def create_menu(self):
        self.stdout.write('  Filling in the weekly menu...')

        dishes = {
            MealType.BREAKFAST: ['Porridge with fruit', 'Scrambled eggs on toast', 'Pancakes'],
            MealType.LUNCH: ['Chicken and rice', 'Vegetable lasagne', 'Bean chili', 'Fish tacos'],
            MealType.DINNER: ['Lentil soup', 'Beef stew', 'Pasta primavera'],
        }

        # Leave Sunday unset so the "not configured" state shows up
        for day in DayOfWeek.values[:-1]:
            for meal_type, options in dishes.items():
                WeeklyMenuTemplate.objects.filter(
                    day_of_week=day,
                    meal_type=meal_type,
                ).update(main_dish=random.choice(options))

    def create_meals(self, students, staff):
        self.stdout.write('  Creating meal records...')

        today = timezone.localdate()
        for days_ago in range(1, 8):
            meal_date = today - timedelta(days=days_ago)
            for student in students:
                if not student.can_receive_meals:
                    continue
                for meal_type in MealType.values:
                    if random.random() < 0.8:
                        MealRecord.objects.get_or_create(
                            student=student,
                            meal_date=meal_date,
                            meal_type=meal_type,
                            defaults={'recorded_by': staff},
                        )

    def create_announcements(self, staff):
        self.stdout.write('  Creating announcements...')

        now = timezone.now()
        announcements_data = [
            ('Welcome back', 'The cafeteria opens at 7:00 every weekday this term.', 72),
            ('Allergy forms', 'Please hand in updated allergy forms at the office by Friday.', 30),
            ('Pizza Friday', 'This Friday lunch is pizza day. Vegetarian options available.', 2),
        ]

        for title, content, hours_ago in announcements_data:
            Announcement.objects.get_or_create(
                title=title,
                defaults={
                    'content': content,
                    'posted_by': staff,
                    'created_at': now - timedelta(hours=hours_ago),
                },
            )
