from django.db import models
from user.models import Employee, User


class LeaveStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    APPROVED = "Approved", "Approved"
    REJECTED = "Rejected", "Rejected"


class LeaveRequest(models.Model):
    id = models.AutoField(primary_key=True, db_column="leave_id")

    employee = models.ForeignKey(
        Employee,
        related_name="leaves",
        on_delete=models.CASCADE
    )

    leave_type = models.CharField(max_length=50)
    start_date = models.DateField()
    end_date = models.DateField()
    reason = models.TextField()

    status = models.CharField(
        max_length=20,
        choices=LeaveStatus.choices,
        default=LeaveStatus.PENDING
    )

    # write-once decision slot; deleting the deciding user is refused
    action_by = models.ForeignKey(
        User,
        related_name="leave_actions",
        on_delete=models.RESTRICT,
        null=True,
        blank=True
    )
    action_at = models.DateTimeField(null=True, blank=True)
    reject_reason = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "leave_requests"
        ordering = ["-start_date", "-id"]

    def __str__(self):
        return f"{self.leave_type} {self.start_date}..{self.end_date} ({self.status})"
