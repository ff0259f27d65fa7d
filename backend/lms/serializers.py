from rest_framework import serializers
from .models import LeaveRequest


class LeaveRequestCreateSerializer(serializers.Serializer):
    leave_type = serializers.CharField(max_length=50)
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    reason = serializers.CharField()

    def validate(self, attrs):
        if attrs["start_date"] > attrs["end_date"]:
            raise serializers.ValidationError(
                {"end_date": "Start date cannot be after end date"}
            )
        return attrs


class LeaveRejectSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class LeaveRequestListSerializer(serializers.ModelSerializer):
    employee_id = serializers.IntegerField(read_only=True)
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)
    owner_role = serializers.CharField(source="employee.user.role", read_only=True)
    action_by = serializers.CharField(source="action_by.username", read_only=True, default=None)

    class Meta:
        model = LeaveRequest
        fields = [
            "id",
            "employee_id",
            "employee_name",
            "owner_role",
            "leave_type",
            "start_date",
            "end_date",
            "reason",
            "status",
            "action_by",
            "action_at",
            "reject_reason",
            "created_at",
        ]
