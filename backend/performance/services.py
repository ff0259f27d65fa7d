from django.utils import timezone
from rest_framework.exceptions import NotFound

from ems import access
from ems.exceptions import InvalidInput
from ems.log_app import loggers
from lms.utils.leave_utils import month_bounds
from user.models import Employee
from .models import PerformanceReview


def list_reviews():
    return PerformanceReview.objects.select_related("employee__user", "reviewer")


def add_review(actor, employee_id, rating, feedback, review_month=None):
    employee = Employee.objects.filter(pk=employee_id).first()
    if not employee:
        raise NotFound("Employee not found")

    access.check_review_author(actor, employee)

    review_month = review_month or timezone.localdate().strftime("%Y-%m")
    try:
        month_bounds(review_month)
    except ValueError as e:
        raise InvalidInput(str(e))

    review = PerformanceReview.objects.create(
        employee=employee,
        reviewer=actor,
        rating=rating,
        feedback=feedback,
        review_month=review_month,
    )
    loggers.info(f"Review #{review.id} for employee {employee.id} by user {actor.id} ({rating}/5)")
    return review


def update_review(actor, review_id, **changes):
    review = PerformanceReview.objects.filter(pk=review_id).first()
    if not review:
        raise NotFound("Review not found")

    access.check_review_editor(actor, review)

    for field in ("rating", "feedback"):
        if field in changes:
            setattr(review, field, changes[field])
    review.save(update_fields=["rating", "feedback"])

    loggers.info(f"Review #{review.id} updated by user {actor.id}")
    return review
