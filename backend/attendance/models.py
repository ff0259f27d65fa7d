from django.db import models
from user.models import Employee


class AttendanceStatus(models.TextChoices):
    PRESENT = "Present", "Present"
    ABSENT = "Absent", "Absent"


class Attendance(models.Model):
    id = models.AutoField(primary_key=True, db_column="attendance_id")

    employee = models.ForeignKey(
        Employee,
        related_name="attendances",
        on_delete=models.CASCADE
    )

    date = models.DateField()
    check_in = models.TimeField(null=True, blank=True)
    check_out = models.TimeField(null=True, blank=True)

    status = models.CharField(
        max_length=50,
        choices=AttendanceStatus.choices,
        default=AttendanceStatus.ABSENT
    )

    class Meta:
        db_table = "attendance"
        ordering = ["date", "id"]
        constraints = [
            models.UniqueConstraint(fields=["employee", "date"], name="attendance_one_per_day"),
        ]

    def __str__(self):
        return f"{self.employee_id} {self.date} ({self.status})"
