from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsStaffRole
from apps.students.permissions import IsLinkedStudent

from .serializers import (
    AnnouncementSerializer,
    AnnouncementInputSerializer,
    StudentAnnouncementSerializer,
    UnreadCountSerializer,
    MarkReadSerializer,
)
from .services import (
    list_announcements,
    get_announcement,
    create_announcement,
    update_announcement,
    delete_announcement,
    AnnouncementNotFoundError,
)
from .unread import unread_count, unread_ids, mark_as_read, dismiss


@extend_schema(
    methods=['GET'],
    responses={200: AnnouncementSerializer(many=True)},
    description="All announcements, newest first.",
    tags=['announcements'],
)
@extend_schema(
    methods=['POST'],
    request=AnnouncementInputSerializer,
    responses={201: AnnouncementSerializer},
    description="Post an announcement to all students.",
    tags=['announcements'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsStaffRole])
def announcement_list(request):
    if request.method == 'GET':
        return Response(AnnouncementSerializer(list_announcements(), many=True).data)

    serializer = AnnouncementInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    announcement = create_announcement(
        posted_by=request.user,
        **serializer.validated_data,
    )
    return Response(
        {
            'message': 'Announcement posted successfully',
            'announcement': AnnouncementSerializer(announcement).data,
        },
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    methods=['GET'],
    responses={200: AnnouncementSerializer},
    tags=['announcements'],
)
@extend_schema(
    methods=['PUT', 'PATCH'],
    request=AnnouncementInputSerializer,
    responses={200: AnnouncementSerializer},
    description="Edit an announcement.",
    tags=['announcements'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None},
    tags=['announcements'],
)
@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsStaffRole])
def announcement_detail(request, announcement_id):
    try:
        if request.method == 'GET':
            announcement = get_announcement(announcement_id=announcement_id)
            return Response(AnnouncementSerializer(announcement).data)

        if request.method == 'DELETE':
            delete_announcement(announcement_id=announcement_id)
            return Response(
                {'message': 'Announcement deleted successfully'},
                status=status.HTTP_204_NO_CONTENT
            )

        serializer = AnnouncementInputSerializer(
            data=request.data,
            partial=request.method == 'PATCH',
        )
        serializer.is_valid(raise_exception=True)
        announcement = update_announcement(
            announcement_id=announcement_id,
            **serializer.validated_data,
        )
    except AnnouncementNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(
        {
            'message': 'Announcement updated successfully',
            'announcement': AnnouncementSerializer(announcement).data,
        }
    )


@extend_schema(
    responses={200: StudentAnnouncementSerializer(many=True)},
    description="Announcements for the signed-in student with unread flags.",
    tags=['announcements'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def my_announcements(request):
    student = request.user.student
    serializer = StudentAnnouncementSerializer(
        list_announcements(),
        many=True,
        context={'unread_ids': unread_ids(student=student)},
    )
    return Response(serializer.data)


@extend_schema(
    responses={200: UnreadCountSerializer},
    description="Number of unread announcements of the signed-in student.",
    tags=['announcements'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def my_unread_count(request):
    return Response({'unread_count': unread_count(student=request.user.student)})


@extend_schema(
    request=None,
    responses={200: MarkReadSerializer},
    description="Mark every current announcement as read.",
    tags=['announcements'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def mark_all_read(request):
    watermark = mark_as_read(student=request.user.student)
    return Response({
        'message': 'All announcements marked as read',
        'last_checked_announcements': watermark,
    })


@extend_schema(
    request=None,
    responses={200: UnreadCountSerializer},
    description="Dismiss one announcement. Dismissing twice is harmless.",
    tags=['announcements'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsLinkedStudent])
def dismiss_announcement(request, announcement_id):
    try:
        announcement = get_announcement(announcement_id=announcement_id)
    except AnnouncementNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    student = request.user.student
    dismiss(student=student, announcement=announcement)
    return Response({
        'message': 'Announcement dismissed',
        'unread_count': unread_count(student=student),
    })
