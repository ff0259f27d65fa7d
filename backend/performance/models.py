from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from user.models import Employee, User


class PerformanceReview(models.Model):
    id = models.AutoField(primary_key=True, db_column="review_id")

    employee = models.ForeignKey(
        Employee,
        related_name="reviews",
        on_delete=models.CASCADE
    )

    # authorship is part of the record; a reviewer with reviews cannot be deleted
    reviewer = models.ForeignKey(
        User,
        related_name="reviews_written",
        on_delete=models.RESTRICT,
        null=True,
        blank=True
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    feedback = models.TextField()
    review_date = models.DateField(default=timezone.localdate)
    review_month = models.CharField(max_length=7)

    class Meta:
        db_table = "performance_reviews"
        ordering = ["-review_date", "-id"]

    def __str__(self):
        return f"Review {self.employee_id} {self.review_month} ({self.rating})"
