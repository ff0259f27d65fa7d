from decimal import Decimal

from django.db import models
from user.models import Employee


class Payroll(models.Model):
    id = models.AutoField(primary_key=True, db_column="payroll_id")

    employee = models.ForeignKey(
        Employee,
        related_name="payrolls",
        on_delete=models.CASCADE
    )

    month = models.CharField(max_length=7)
    basic_salary = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    monthly_salary = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    bonus = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    deductions = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    net_salary = models.DecimalField(max_digits=10, decimal_places=2)
    payment_date = models.DateField()

    class Meta:
        db_table = "payroll"
        ordering = ["-month", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["employee", "month"], name="payroll_one_per_month"),
        ]

    def __str__(self):
        return f"Payroll {self.employee_id} {self.month}"
