import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("user", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Request",
            fields=[
                ("id", models.AutoField(db_column="request_id", primary_key=True, serialize=False)),
                ("items", models.TextField()),
                ("description", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending Manager", "Pending Manager"),
                            ("Pending Admin", "Pending Admin"),
                            ("Approved", "Approved"),
                            ("Rejected", "Rejected"),
                        ],
                        default="Pending Manager",
                        max_length=20,
                    ),
                ),
                ("manager_approved", models.BooleanField(blank=True, null=True)),
                ("manager_reason", models.TextField(blank=True, null=True)),
                ("manager_approved_at", models.DateTimeField(blank=True, null=True)),
                ("admin_approved", models.BooleanField(blank=True, null=True)),
                ("admin_reason", models.TextField(blank=True, null=True)),
                ("admin_approved_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "admin_approved_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.RESTRICT,
                        related_name="admin_decisions",
                        to="user.user",
                    ),
                ),
                (
                    "manager_approved_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.RESTRICT,
                        related_name="manager_decisions",
                        to="user.user",
                    ),
                ),
                (
                    "requester",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="requests",
                        to="user.user",
                    ),
                ),
            ],
            options={
                "db_table": "requests",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
