from django.db import models

from .roles import Role


class User(models.Model):
    id = models.AutoField(primary_key=True)
    username = models.CharField(max_length=100)
    email = models.EmailField(max_length=150, unique=True)
    hashed_password = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=Role.choices)
    is_active = models.BooleanField(default=True)

    created_by = models.ForeignKey(
        "self",
        related_name="+",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column="created_by"
    )
    updated_by = models.ForeignKey(
        "self",
        related_name="+",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column="updated_by"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"

    @property
    def is_authenticated(self):
        return True

    def __str__(self):
        return self.email


class Department(models.Model):
    id = models.AutoField(primary_key=True, db_column="department_id")
    department_name = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "departments"

    def __str__(self):
        return self.department_name


class Employee(models.Model):
    class Status(models.TextChoices):
        ACTIVE = "Active", "Active"
        INACTIVE = "Inactive", "Inactive"

    id = models.AutoField(primary_key=True, db_column="employee_id")

    user = models.OneToOneField(
        User,
        related_name="employee",
        on_delete=models.CASCADE
    )

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    dob = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=20, null=True, blank=True)
    phone = models.CharField(max_length=15, null=True, blank=True)
    address = models.TextField(null=True, blank=True)
    joining_date = models.DateField()

    department = models.ForeignKey(
        Department,
        related_name="employees",
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )

    designation = models.CharField(max_length=100)
    salary = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)

    is_experienced = models.BooleanField(default=False)
    previous_company = models.CharField(max_length=255, null=True, blank=True)
    previous_salary = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    next_increment = models.DateField(null=True, blank=True)

    class Meta:
        db_table = "employees"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return self.full_name
