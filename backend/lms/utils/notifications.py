from django.conf import settings
from django.core.mail import send_mail

from ems.log_app import loggers


def send_notification(to, subject, text):
    """Best-effort email; failures are logged, never raised."""
    if not to:
        loggers.warning(f"Cannot send email '{subject}': recipient email is missing")
        return False

    try:
        send_mail(subject, text, settings.DEFAULT_FROM_EMAIL, [to], fail_silently=False)
    except Exception:
        loggers.warning(f"Failed to send email '{subject}' to {to}", exc_info=True)
        return False

    loggers.info(f"Email sent | {subject} | {to}")
    return True
