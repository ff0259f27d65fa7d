from rest_framework import serializers
from .models import Request


class RequestWriteSerializer(serializers.Serializer):
    items = serializers.CharField()
    description = serializers.CharField()


class RejectReasonSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RequestSerializer(serializers.ModelSerializer):
    requester = serializers.SerializerMethodField()
    manager_approver = serializers.CharField(
        source="manager_approved_by.username", read_only=True, default=None
    )
    admin_approver = serializers.CharField(
        source="admin_approved_by.username", read_only=True, default=None
    )

    class Meta:
        model = Request
        fields = [
            "id",
            "requester_id",
            "requester",
            "items",
            "description",
            "status",
            "manager_approved",
            "manager_reason",
            "manager_approved_by",
            "manager_approver",
            "manager_approved_at",
            "admin_approved",
            "admin_reason",
            "admin_approved_by",
            "admin_approver",
            "admin_approved_at",
            "created_at",
            "updated_at",
        ]

    def get_requester(self, obj):
        user = obj.requester
        employee = getattr(user, "employee", None)
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "role": user.role,
            "first_name": employee.first_name if employee else None,
            "last_name": employee.last_name if employee else None,
        }
