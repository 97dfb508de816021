from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # Current user
    path('user/', views.get_current_user, name='current-user'),
    path('user/role/', views.get_current_role, name='current-role'),
    path('user/password/', views.update_password, name='update-password'),
]
