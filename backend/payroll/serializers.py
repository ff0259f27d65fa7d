from decimal import Decimal

from rest_framework import serializers
from .models import Payroll
from .services import net_salary

MONEY = {"max_digits": 10, "decimal_places": 2, "min_value": Decimal("0.00")}


class PayrollGenerateSerializer(serializers.Serializer):
    employee_id = serializers.IntegerField()
    month = serializers.CharField(max_length=7)
    basic_salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.00"), default=Decimal("0.00"))
    monthly_salary = serializers.DecimalField(**MONEY, default=Decimal("0.00"))
    bonus = serializers.DecimalField(**MONEY, default=Decimal("0.00"))
    deductions = serializers.DecimalField(**MONEY, default=Decimal("0.00"))

    def validate(self, attrs):
        if net_salary(attrs["monthly_salary"], attrs["bonus"], attrs["deductions"]) < 0:
            raise serializers.ValidationError(
                {"deductions": "Deductions cannot exceed monthly salary plus bonus"}
            )
        return attrs


class PayrollSerializer(serializers.ModelSerializer):
    employee_id = serializers.IntegerField(read_only=True)
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)

    class Meta:
        model = Payroll
        fields = [
            "id",
            "employee_id",
            "employee_name",
            "month",
            "basic_salary",
            "monthly_salary",
            "bonus",
            "deductions",
            "net_salary",
            "payment_date",
        ]


class PayslipSerializer(PayrollSerializer):
    email = serializers.CharField(source="employee.user.email", read_only=True)
    designation = serializers.CharField(source="employee.designation", read_only=True)
    department = serializers.CharField(source="employee.department.department_name", read_only=True, default=None)

    class Meta(PayrollSerializer.Meta):
        fields = PayrollSerializer.Meta.fields + ["email", "designation", "department"]
