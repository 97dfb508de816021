from django.urls import path
from . import views

app_name = 'announcements'

urlpatterns = [
    # Staff management
    path('', views.announcement_list, name='announcement-list'),
    path('<uuid:announcement_id>/', views.announcement_detail, name='announcement-detail'),

    # Student reads
    path('mine/', views.my_announcements, name='my-announcements'),
    path('unread-count/', views.my_unread_count, name='unread-count'),
    path('mark-read/', views.mark_all_read, name='mark-read'),
    path('<uuid:announcement_id>/dismiss/', views.dismiss_announcement, name='dismiss'),
]
