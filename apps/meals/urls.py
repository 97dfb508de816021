from django.urls import path
from . import views

app_name = 'meals'

urlpatterns = [
    # Meal recording (staff)
    path('record/', views.record, name='record-meal'),
    path('today/', views.todays_meals, name='todays-meals'),

    # Student history
    path('history/', views.my_history, name='my-history'),

    # Weekly menu
    path('menu/', views.menu_templates, name='menu-templates'),
    path('menu/today/', views.todays_menu, name='todays-menu'),
    path('menu/<str:day>/<str:meal_type>/', views.update_menu, name='update-menu'),

    # Serving schedules
    path('schedules/', views.schedules, name='schedules'),
    path('schedules/<uuid:schedule_id>/', views.update_schedule_view, name='update-schedule'),

    # Reports (admin)
    path('reports/', views.reports, name='reports'),
]
