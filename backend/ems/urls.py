from django.urls import include, path

urlpatterns = [
    path("api/", include("user.urls")),
    path("api/leaves/", include("lms.urls")),
    path("api/requests/", include("requisition.urls")),
    path("api/attendance/", include("attendance.urls")),
    path("api/payroll/", include("payroll.urls")),
    path("api/performance/", include("performance.urls")),
]
