from django.urls import path
from .views import (
    get_attendance,
    check_in,
    check_out,
    get_monthly_attendance,
    get_monthly_summary,
    get_team_monthly_attendance,
    get_daily_attendance,
)

urlpatterns = [
    path("", get_attendance, name="attendance-list"),
    path("checkin/", check_in, name="attendance-checkin"),
    path("checkout/", check_out, name="attendance-checkout"),
    path("monthly/<str:month>/", get_monthly_attendance, name="attendance-monthly"),
    path("summary/<str:month>/", get_monthly_summary, name="attendance-summary"),
    path("all/monthly/<str:month>/", get_team_monthly_attendance, name="attendance-all-monthly"),
    path("all/date/<str:day>/", get_daily_attendance, name="attendance-all-daily"),
]
