from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework import status

from ems import access
from user.permissions import allow_roles
from . import services
from .serializers import ReviewCreateSerializer, ReviewUpdateSerializer, ReviewSerializer


class ReviewListView(APIView):

    def get_permissions(self):
        if self.request.method == "POST":
            return [allow_roles(access.REVIEW_WRITERS)()]
        return [allow_roles(access.REVIEW_READERS)()]

    def get(self, request):
        reviews = services.list_reviews()
        return Response(ReviewSerializer(reviews, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        review = services.add_review(request.user, **serializer.validated_data)
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class ReviewDetailView(APIView):
    permission_classes = [allow_roles(access.REVIEW_WRITERS)]

    def put(self, request, review_id):
        serializer = ReviewUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        review = services.update_review(request.user, review_id, **serializer.validated_data)
        return Response(ReviewSerializer(review).data, status=status.HTTP_200_OK)
