from django.urls import path
from .views import RequestListView, RequestDetailView, manager_approve, manager_reject, admin_approve, admin_reject

urlpatterns = [
    path("", RequestListView.as_view(), name="request-list"),
    path("<int:request_id>/", RequestDetailView.as_view(), name="request-detail"),
    path("<int:request_id>/manager/approve/", manager_approve, name="request-manager-approve"),
    path("<int:request_id>/manager/reject/", manager_reject, name="request-manager-reject"),
    path("<int:request_id>/admin/approve/", admin_approve, name="request-admin-approve"),
    path("<int:request_id>/admin/reject/", admin_reject, name="request-admin-reject"),
]
