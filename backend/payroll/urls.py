from django.urls import path
from .views import get_payrolls, generate_payroll, get_payslip, delete_payroll

urlpatterns = [
    path("", get_payrolls, name="payroll-list"),
    path("generate/", generate_payroll, name="payroll-generate"),
    path("<int:payroll_id>/payslip/", get_payslip, name="payroll-payslip"),
    path("<int:payroll_id>/", delete_payroll, name="payroll-delete"),
]
