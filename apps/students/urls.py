from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'students'

router = DefaultRouter()
router.register(r'', views.StudentViewSet, basename='student')

urlpatterns = [
    # GET    /api/students/search/?student_id=STU00001 - Staff lookup
    # GET    /api/students/me/                          - Own profile (student)
    path('search/', views.search_student, name='student-search'),
    path('me/', views.my_profile, name='my-profile'),

    # GET/POST /api/students/, GET/PUT/PATCH/DELETE /api/students/{id}/
    path('', include(router.urls)),
]
