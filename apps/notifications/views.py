from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.students.permissions import IsLinkedStudent

from .preferences import PreferenceStore, SessionStorage
from .serializers import (
    NotificationPreferencesSerializer,
    EventsQuerySerializer,
    EventFrameSerializer,
    NoticeSerializer,
)
from .sessions import notifier_registry


def _preference_store(request):
    return PreferenceStore(SessionStorage(request.session))


def _saved(request, preferences):
    notifier_registry.update_preferences(request.user.id, preferences)
    return Response(preferences.to_dict())


@extend_schema(
    methods=['GET'],
    responses={200: NotificationPreferencesSerializer},
    description="Notification preferences of this device.",
    tags=['notifications'],
)
@extend_schema(
    methods=['PATCH'],
    request=NotificationPreferencesSerializer,
    responses={200: NotificationPreferencesSerializer},
    description="Change notification preferences of this device.",
    tags=['notifications'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def preferences(request):
    store = _preference_store(request)
    if request.method == 'GET':
        return Response(store.load().to_dict())

    serializer = NotificationPreferencesSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return _saved(request, store.update(**serializer.validated_data))


@extend_schema(
    request=None,
    responses={200: NotificationPreferencesSerializer},
    description="Turn the new-announcement sound on or off.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_sound(request):
    return _saved(request, _preference_store(request).toggle('sound_enabled'))


@extend_schema(
    request=None,
    responses={200: NotificationPreferencesSerializer},
    description="Turn new-announcement notices on or off.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_toast(request):
    return _saved(request, _preference_store(request).toggle('toast_enabled'))


@extend_schema(
    request=None,
    responses={201: None},
    description="Start receiving new-announcement events. Replaces an existing subscription.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def connect(request):
    notifier_registry.open(request.user.id, preferences=_preference_store(request))
    return Response(
        {'message': 'Subscribed to announcements'},
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    request=None,
    description="Stop receiving new-announcement events.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def disconnect(request):
    closed = notifier_registry.close(request.user.id)
    return Response({
        'message': 'Unsubscribed from announcements' if closed else 'No active subscription'
    })


@extend_schema(
    parameters=[
        OpenApiParameter('wait', OpenApiTypes.INT, description='Seconds to wait for an announcement (0 to NOTIFICATION_MAX_WAIT)'),
    ],
    responses={200: EventFrameSerializer(many=True)},
    description="Collect tone, notice and invalidate frames produced since the last call.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def events(request):
    query = EventsQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    session = notifier_registry.get_or_open(
        request.user.id,
        preferences=_preference_store(request),
    )
    frames = session.poll(timeout=query.validated_data['wait'])
    return Response({'events': frames})


@extend_schema(
    responses={200: NoticeSerializer(many=True)},
    description="New-announcement notices that have not expired yet.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def notices(request):
    session = notifier_registry.get(request.user.id)
    if session is None:
        return Response([])
    return Response([notice.to_dict() for notice in session.notices.active()])


@extend_schema(
    request=None,
    description="Dismiss a notice before it expires.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def dismiss_notice(request, notice_id):
    session = notifier_registry.get(request.user.id)
    if session is None or not session.notices.dismiss(notice_id):
        return Response({'error': 'Notice not found'}, status=status.HTTP_404_NOT_FOUND)
    return Response({'message': 'Notice dismissed'})
