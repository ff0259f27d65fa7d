from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework import status

from ems import access
from user.permissions import IsAuthenticatedUser, allow_roles
from . import services
from .serializers import RequestSerializer, RequestWriteSerializer, RejectReasonSerializer


class RequestListView(APIView):

    def get_permissions(self):
        if self.request.method == "POST":
            return [allow_roles(access.REQUEST_CREATORS)()]
        return [IsAuthenticatedUser()]

    def get(self, request):
        requests = services.list_requests(request.user)
        return Response(
            RequestSerializer(requests, many=True).data,
            status=status.HTTP_200_OK
        )

    def post(self, request):
        serializer = RequestWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        request_obj = services.create_request(request.user, **serializer.validated_data)
        return Response(
            RequestSerializer(request_obj).data,
            status=status.HTTP_201_CREATED
        )


class RequestDetailView(APIView):
    permission_classes = [allow_roles(access.REQUEST_EDITORS)]

    def put(self, request, request_id):
        serializer = RequestWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        request_obj = services.update_request(request_id, request.user, **serializer.validated_data)
        return Response(
            RequestSerializer(request_obj).data,
            status=status.HTTP_200_OK
        )

    def delete(self, request, request_id):
        services.delete_request(request_id, request.user)
        return Response(
            {"message": "Request deleted successfully"},
            status=status.HTTP_200_OK
        )


def _reason(request):
    serializer = RejectReasonSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data.get("reason")


@api_view(["PUT"])
@permission_classes([allow_roles(access.REQUEST_MANAGERS)])
def manager_approve(request, request_id):
    request_obj = services.manager_approve(request_id, request.user)
    return Response(RequestSerializer(request_obj).data, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([allow_roles(access.REQUEST_MANAGERS)])
def manager_reject(request, request_id):
    request_obj = services.manager_reject(request_id, request.user, _reason(request))
    return Response(RequestSerializer(request_obj).data, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([allow_roles(access.REQUEST_ADMINS)])
def admin_approve(request, request_id):
    request_obj = services.admin_approve(request_id, request.user)
    return Response(RequestSerializer(request_obj).data, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([allow_roles(access.REQUEST_ADMINS)])
def admin_reject(request, request_id):
    request_obj = services.admin_reject(request_id, request.user, _reason(request))
    return Response(RequestSerializer(request_obj).data, status=status.HTTP_200_OK)
