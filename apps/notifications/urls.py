from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    # Device preferences
    path('preferences/', views.preferences, name='preferences'),
    path('preferences/sound/toggle/', views.toggle_sound, name='toggle-sound'),
    path('preferences/toast/toggle/', views.toggle_toast, name='toggle-toast'),

    # Realtime announcements
    path('connect/', views.connect, name='connect'),
    path('disconnect/', views.disconnect, name='disconnect'),
    path('events/', views.events, name='events'),
    path('notices/', views.notices, name='notices'),
    path('notices/<uuid:notice_id>/dismiss/', views.dismiss_notice, name='dismiss-notice'),
]
