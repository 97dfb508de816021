from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole, IsStaffRole
from apps.students.permissions import IsLinkedStudent
from apps.students.services import get_student_by_id, StudentNotFoundError

from .serializers import (
    MealRecordSerializer,
    RecordMealSerializer,
    TodaysMealsQuerySerializer,
    MealHistoryDaySerializer,
    WeeklyMenuTemplateSerializer,
    MenuUpdateSerializer,
    MenuPathSerializer,
    TodaysMenuSerializer,
    MealScheduleSerializer,
    MealReportSerializer,
    RecentMealSerializer,
)
from .services import (
    record_meal,
    get_todays_meals,
    get_meal_history,
    list_menu_templates,
    update_menu_template,
    get_todays_menu,
    list_schedules,
    update_schedule,
    MealReportQueries,
    StudentNotActiveError,
    DuplicateMealError,
    MealRecordingError,
    MenuValidationError,
    MenuTemplateNotFoundError,
    ScheduleNotFoundError,
    InvalidScheduleError,
)


@extend_schema(
    request=RecordMealSerializer,
    responses={201: MealRecordSerializer},
    description="Record a meal served today to an active student.",
    tags=['meals'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsStaffRole])
def record(request):
    """Record a meal - thin HTTP handler."""
    serializer = RecordMealSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        student = get_student_by_id(student_pk=serializer.validated_data['student'])
    except StudentNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    try:
        meal = record_meal(
            student=student,
            meal_type=serializer.validated_data['meal_type'],
            recorded_by=request.user,
        )
    except StudentNotActiveError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except DuplicateMealError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except MealRecordingError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(
        {
            'message': 'Meal recorded successfully',
            'meal': MealRecordSerializer(meal).data,
        },
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    parameters=[
        OpenApiParameter('student', OpenApiTypes.UUID, description='Student primary key'),
    ],
    responses={200: MealRecordSerializer(many=True)},
    description="Meals already recorded today for a student.",
    tags=['meals'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def todays_meals(request):
    query = TodaysMealsQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    try:
        student = get_student_by_id(student_pk=query.validated_data['student'])
    except StudentNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    meals = get_todays_meals(student=student)
    return Response(MealRecordSerializer(meals, many=True).data)


@extend_schema(
    responses={200: MealHistoryDaySerializer(many=True)},
    description="Recent meal history of the signed-in student, grouped by date.",
    tags=['meals'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def my_history(request):
    history = get_meal_history(student=request.user.student)
    return Response(MealHistoryDaySerializer(history, many=True).data)


@extend_schema(
    responses={200: WeeklyMenuTemplateSerializer(many=True)},
    description="All weekly menu templates, Monday to Sunday.",
    tags=['menu'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def menu_templates(request):
    templates = list_menu_templates()
    return Response(WeeklyMenuTemplateSerializer(templates, many=True).data)


@extend_schema(
    request=MenuUpdateSerializer,
    responses={200: WeeklyMenuTemplateSerializer},
    description="Set the dish for one meal on one weekday.",
    tags=['menu'],
)
@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated, IsAdminRole])
def update_menu(request, day, meal_type):
    path_serializer = MenuPathSerializer(data={'day': day, 'meal_type': meal_type})
    path_serializer.is_valid(raise_exception=True)

    serializer = MenuUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        template = update_menu_template(
            **path_serializer.validated_data,
            **serializer.validated_data,
        )
    except MenuValidationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except MenuTemplateNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(WeeklyMenuTemplateSerializer(template).data)


@extend_schema(
    responses={200: TodaysMenuSerializer},
    description="Today's menu. Meals without a configured dish are marked configured=false.",
    tags=['menu'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def todays_menu(request):
    return Response(get_todays_menu())


@extend_schema(
    responses={200: MealScheduleSerializer(many=True)},
    description="Serving window of each meal type.",
    tags=['meals'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def schedules(request):
    return Response(MealScheduleSerializer(list_schedules(), many=True).data)


@extend_schema(
    request=MealScheduleSerializer,
    responses={200: MealScheduleSerializer},
    description="Change the serving window of a meal type.",
    tags=['meals'],
)
@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated, IsAdminRole])
def update_schedule_view(request, schedule_id):
    serializer = MealScheduleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        schedule = update_schedule(
            schedule_id=schedule_id,
            start_time=serializer.validated_data['start_time'],
            end_time=serializer.validated_data['end_time'],
        )
    except ScheduleNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidScheduleError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(MealScheduleSerializer(schedule).data)


@extend_schema(
    responses={200: MealReportSerializer},
    description="Meal totals per type and the latest recorded meals.",
    tags=['meals'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def reports(request):
    return Response({
        'stats': MealReportQueries.meal_stats(),
        'recent': RecentMealSerializer(MealReportQueries.recent_meals(), many=True).data,
    })
