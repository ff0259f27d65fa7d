from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status

from ems import access
from user.permissions import allow_roles
from user.roles import ALL_ROLES
from . import services
from .serializers import AttendanceSerializer, TeamAttendanceSerializer, MonthlySummarySerializer


@api_view(["GET"])
@permission_classes([allow_roles(access.ATTENDANCE_VIEWERS)])
def get_attendance(request):
    records = services.list_attendance(request.user)
    return Response(TeamAttendanceSerializer(records, many=True).data, status=status.HTTP_200_OK)


@api_view(["POST"])
@permission_classes([allow_roles(access.ATTENDANCE_MARKERS)])
def check_in(request):
    attendance = services.check_in(request.user)

    return Response(
        {
            "message": "Checked in successfully",
            "attendance": AttendanceSerializer(attendance).data
        },
        status=status.HTTP_200_OK
    )


@api_view(["POST"])
@permission_classes([allow_roles(access.ATTENDANCE_MARKERS)])
def check_out(request):
    attendance = services.check_out(request.user)

    return Response(
        {
            "message": "Checked out successfully",
            "attendance": AttendanceSerializer(attendance).data
        },
        status=status.HTTP_200_OK
    )


@api_view(["GET"])
@permission_classes([allow_roles(ALL_ROLES)])
def get_monthly_attendance(request, month):
    records = services.monthly_attendance(request.user, month)
    return Response(AttendanceSerializer(records, many=True).data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([allow_roles(ALL_ROLES)])
def get_monthly_summary(request, month):
    summary = services.monthly_summary(request.user, month)
    return Response(MonthlySummarySerializer(summary).data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([allow_roles(access.ATTENDANCE_VIEWERS)])
def get_team_monthly_attendance(request, month):
    records = services.team_monthly_attendance(request.user, month)
    return Response(TeamAttendanceSerializer(records, many=True).data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([allow_roles(access.ATTENDANCE_VIEWERS)])
def get_daily_attendance(request, day):
    records = services.daily_attendance(request.user, day)
    return Response(TeamAttendanceSerializer(records, many=True).data, status=status.HTTP_200_OK)
