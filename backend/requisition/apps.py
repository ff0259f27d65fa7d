from django.apps import AppConfig


class RequisitionConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "requisition"
    verbose_name = "Resource requests"
