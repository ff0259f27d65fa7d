from rest_framework import serializers
from .models import Attendance


class AttendanceSerializer(serializers.ModelSerializer):
    employee_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Attendance
        fields = ["id", "employee_id", "date", "check_in", "check_out", "status"]


class TeamAttendanceSerializer(AttendanceSerializer):
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)
    role = serializers.CharField(source="employee.user.role", read_only=True)

    class Meta(AttendanceSerializer.Meta):
        fields = AttendanceSerializer.Meta.fields + ["employee_name", "role"]


class MonthlySummarySerializer(serializers.Serializer):
    month = serializers.CharField()
    present = serializers.IntegerField()
    leave = serializers.IntegerField()
    leave_dates = serializers.ListField(child=serializers.DateField())
