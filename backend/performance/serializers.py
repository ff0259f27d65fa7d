from rest_framework import serializers
from .models import PerformanceReview


class ReviewCreateSerializer(serializers.Serializer):
    employee_id = serializers.IntegerField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    feedback = serializers.CharField()
    review_month = serializers.CharField(max_length=7, required=False)


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    feedback = serializers.CharField(required=False)


class ReviewSerializer(serializers.ModelSerializer):
    employee_id = serializers.IntegerField(read_only=True)
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)
    reviewer = serializers.CharField(source="reviewer.username", read_only=True, default=None)

    class Meta:
        model = PerformanceReview
        fields = [
            "id",
            "employee_id",
            "employee_name",
            "reviewer_id",
            "reviewer",
            "rating",
            "feedback",
            "review_date",
            "review_month",
        ]
