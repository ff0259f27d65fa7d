from django.apps import AppConfig


class LmsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "lms"
    verbose_name = "Leave management"
