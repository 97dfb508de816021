from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole, IsStaffRole

from .models import Student
from .permissions import IsLinkedStudent
from .serializers import (
    StudentSerializer,
    StudentInputSerializer,
    StudentSearchSerializer,
)
from .services import (
    create_student,
    update_student,
    delete_student,
    find_student_by_code,
    StudentNotFoundError,
    EmptySearchError,
)


class StudentViewSet(viewsets.ModelViewSet):
    """
    ViewSet for student administration.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: All students, newest first
    create: Create a student with a generated code
    retrieve: Get a specific student
    update / partial_update: Edit a student
    destroy: Delete a student
    """

    queryset = Student.objects.all()
    serializer_class = StudentSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    http_method_names = ['get', 'post', 'put', 'patch', 'delete', 'head', 'options']

    @extend_schema(request=StudentInputSerializer, responses={201: StudentSerializer})
    def create(self, request, *args, **kwargs):
        serializer = StudentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            student = create_student(**serializer.validated_data)
        except RuntimeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(StudentSerializer(student).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=StudentInputSerializer, responses={200: StudentSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()

        data = {
            'full_name': instance.full_name,
            'grade': instance.grade,
            'sex': instance.sex,
            'status': instance.status,
        } if partial else {}
        data.update(request.data.items())

        serializer = StudentInputSerializer(data=data)
        serializer.is_valid(raise_exception=True)

        try:
            student = update_student(student_pk=instance.pk, **serializer.validated_data)
        except StudentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(StudentSerializer(student).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_student(student_pk=self.kwargs['pk'])
        except StudentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    parameters=[
        OpenApiParameter('student_id', OpenApiTypes.STR, description='Student code, case-insensitive'),
    ],
    responses={200: StudentSerializer},
    description="Find a student by code for meal recording.",
    tags=['students'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def search_student(request):
    """Staff lookup by student code."""
    query = StudentSearchSerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    try:
        student = find_student_by_code(code=query.validated_data['student_id'])
    except EmptySearchError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except StudentNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(StudentSerializer(student).data)


@extend_schema(
    responses={200: StudentSerializer},
    description="Profile of the signed-in student.",
    tags=['students'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def my_profile(request):
    return Response(StudentSerializer(request.user.student).data)
