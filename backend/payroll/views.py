from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status

from ems import access
from user.permissions import allow_roles
from . import services
from .serializers import PayrollGenerateSerializer, PayrollSerializer, PayslipSerializer


@api_view(["GET"])
@permission_classes([allow_roles(access.PAYROLL_MANAGERS)])
def get_payrolls(request):
    payrolls = services.list_payrolls(request.query_params.get("month"))
    return Response(PayrollSerializer(payrolls, many=True).data, status=status.HTTP_200_OK)


@api_view(["POST"])
@permission_classes([allow_roles(access.PAYROLL_MANAGERS)])
def generate_payroll(request):
    serializer = PayrollGenerateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    payroll = services.generate_payroll(request.user, **serializer.validated_data)
    return Response(PayrollSerializer(payroll).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([allow_roles(access.PAYSLIP_READERS)])
def get_payslip(request, payroll_id):
    payroll = services.get_payslip(request.user, payroll_id)
    return Response(PayslipSerializer(payroll).data, status=status.HTTP_200_OK)


@api_view(["DELETE"])
@permission_classes([allow_roles(access.PAYROLL_DELETERS)])
def delete_payroll(request, payroll_id):
    services.delete_payroll(request.user, payroll_id)
    return Response(
        {"message": "Payroll record deleted successfully"},
        status=status.HTTP_200_OK
    )
