from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status

from ems import access
from user.permissions import allow_roles
from user.roles import ALL_ROLES
from . import services
from .serializers import LeaveRequestCreateSerializer, LeaveRejectSerializer, LeaveRequestListSerializer


@api_view(["GET"])
@permission_classes([allow_roles(ALL_ROLES)])
def get_leaves(request):
    leaves = services.list_leaves(request.user)
    serializer = LeaveRequestListSerializer(leaves, many=True)

    return Response(
        serializer.data,
        status=status.HTTP_200_OK
    )


@api_view(["POST"])
@permission_classes([allow_roles(access.LEAVE_APPLICANTS)])
def apply_leave(request):
    serializer = LeaveRequestCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    leave = services.apply_leave(request.user, **serializer.validated_data)

    return Response(
        {
            "message": "Leave applied successfully",
            "leave": LeaveRequestListSerializer(leave).data
        },
        status=status.HTTP_201_CREATED
    )


@api_view(["GET", "DELETE"])
@permission_classes([allow_roles(ALL_ROLES)])
def leave_detail(request, leave_id):
    if request.method == "DELETE":
        services.delete_leave(leave_id)
        return Response(
            {"message": "Leave request deleted successfully"},
            status=status.HTTP_200_OK
        )

    leave = services.get_leave(request.user, leave_id)

    return Response(
        LeaveRequestListSerializer(leave).data,
        status=status.HTTP_200_OK
    )


@api_view(["PUT"])
@permission_classes([allow_roles(access.LEAVE_DECIDER_ROLES)])
def approve_leave(request, leave_id):
    leave = services.approve_leave(leave_id, request.user)

    return Response(
        {
            "message": "Leave approved successfully",
            "leave": LeaveRequestListSerializer(leave).data
        },
        status=status.HTTP_200_OK
    )


@api_view(["PUT"])
@permission_classes([allow_roles(access.LEAVE_DECIDER_ROLES)])
def reject_leave(request, leave_id):
    serializer = LeaveRejectSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    leave = services.reject_leave(leave_id, request.user, serializer.validated_data.get("reason"))

    return Response(
        {
            "message": "Leave rejected successfully",
            "leave": LeaveRequestListSerializer(leave).data
        },
        status=status.HTTP_200_OK
    )


@api_view(["GET"])
@permission_classes([allow_roles(ALL_ROLES)])
def get_monthly_leaves(request, month):
    employee = services.get_employee_profile(request.user)
    dates = services.monthly_approved_dates(employee.id, month)

    return Response(
        [d.isoformat() for d in dates],
        status=status.HTTP_200_OK
    )
