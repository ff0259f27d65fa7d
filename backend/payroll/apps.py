from django.apps import AppConfig


class PayrollConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "payroll"
