from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("user", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Payroll",
            fields=[
                ("id", models.AutoField(db_column="payroll_id", primary_key=True, serialize=False)),
                ("month", models.CharField(max_length=7)),
                ("basic_salary", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("monthly_salary", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("bonus", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("deductions", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("net_salary", models.DecimalField(decimal_places=2, max_digits=10)),
                ("payment_date", models.DateField()),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="payrolls",
                        to="user.employee",
                    ),
                ),
            ],
            options={
                "db_table": "payroll",
                "ordering": ["-month", "-id"],
            },
        ),
        migrations.AddConstraint(
            model_name="payroll",
            constraint=models.UniqueConstraint(fields=("employee", "month"), name="payroll_one_per_month"),
        ),
    ]
