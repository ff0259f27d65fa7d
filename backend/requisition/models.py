from django.db import models
from user.models import User


class RequestStatus(models.TextChoices):
    PENDING_MANAGER = "Pending Manager", "Pending Manager"
    PENDING_ADMIN = "Pending Admin", "Pending Admin"
    APPROVED = "Approved", "Approved"
    REJECTED = "Rejected", "Rejected"


class Request(models.Model):
    id = models.AutoField(primary_key=True, db_column="request_id")

    requester = models.ForeignKey(
        User,
        related_name="requests",
        on_delete=models.CASCADE
    )

    items = models.TextField()
    description = models.TextField()

    status = models.CharField(
        max_length=20,
        choices=RequestStatus.choices,
        default=RequestStatus.PENDING_MANAGER
    )

    # manager stage
    manager_approved = models.BooleanField(null=True, blank=True)
    manager_reason = models.TextField(null=True, blank=True)
    manager_approved_by = models.ForeignKey(
        User,
        related_name="manager_decisions",
        on_delete=models.RESTRICT,
        null=True,
        blank=True
    )
    manager_approved_at = models.DateTimeField(null=True, blank=True)

    # admin stage
    admin_approved = models.BooleanField(null=True, blank=True)
    admin_reason = models.TextField(null=True, blank=True)
    admin_approved_by = models.ForeignKey(
        User,
        related_name="admin_decisions",
        on_delete=models.RESTRICT,
        null=True,
        blank=True
    )
    admin_approved_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "requests"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Request #{self.id} ({self.status})"
