from django.urls import path
from .views import get_leaves, apply_leave, leave_detail, approve_leave, reject_leave, get_monthly_leaves

urlpatterns = [
    path("", get_leaves, name="leave-list"),
    path("apply/", apply_leave, name="leave-apply"),
    path("monthly/<str:month>/", get_monthly_leaves, name="leave-monthly"),
    path("<int:leave_id>/", leave_detail, name="leave-detail"),
    path("<int:leave_id>/approve/", approve_leave, name="leave-approve"),
    path("<int:leave_id>/reject/", reject_leave, name="leave-reject"),
]
