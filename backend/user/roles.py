from django.db import models


class Role(models.TextChoices):
    EMPLOYEE = "Employee", "Employee"
    MANAGER = "Manager", "Manager"
    HR = "HR", "HR"
    ADMIN = "Admin", "Admin"
    SUPERUSER = "Superuser", "Superuser"


ALL_ROLES = frozenset(Role)
ADMIN_ROLES = frozenset({Role.ADMIN, Role.SUPERUSER})


def as_role(value):
    """Coerce a stored role string into ``Role``; unknown values give None."""
    try:
        return Role(value)
    except ValueError:
        return None
