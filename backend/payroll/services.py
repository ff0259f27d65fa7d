"""
Monthly payroll: one record per employee per month, with
net = monthly salary + bonus - deductions.
"""
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from ems import access
from ems.exceptions import InvalidInput
from ems.log_app import loggers
from lms.utils.leave_utils import month_bounds
from user.models import Employee
from .models import Payroll

ZERO = Decimal("0.00")


def net_salary(monthly_salary, bonus, deductions):
    return (monthly_salary or ZERO) + (bonus or ZERO) - (deductions or ZERO)


def _get_payroll(payroll_id):
    payroll = (
        Payroll.objects
        .select_related("employee__user", "employee__department")
        .filter(pk=payroll_id)
        .first()
    )
    if not payroll:
        raise NotFound("Payroll not found")
    return payroll


def list_payrolls(month=None):
    payrolls = Payroll.objects.select_related("employee__user", "employee__department")
    if month:
        try:
            month_bounds(month)
        except ValueError as e:
            raise InvalidInput(str(e))
        payrolls = payrolls.filter(month=month)
    return payrolls


def generate_payroll(actor, employee_id, month, basic_salary=ZERO, monthly_salary=ZERO, bonus=ZERO, deductions=ZERO):
    try:
        month_bounds(month)
    except ValueError as e:
        raise InvalidInput(str(e))

    employee = Employee.objects.filter(pk=employee_id).first()
    if not employee:
        raise NotFound("Employee not found")

    if Payroll.objects.filter(employee=employee, month=month).exists():
        raise InvalidInput("Payroll already exists for this employee and month")

    try:
        with transaction.atomic():
            payroll = Payroll.objects.create(
                employee=employee,
                month=month,
                basic_salary=basic_salary,
                monthly_salary=monthly_salary,
                bonus=bonus,
                deductions=deductions,
                net_salary=net_salary(monthly_salary, bonus, deductions),
                payment_date=timezone.localdate(),
            )
    except IntegrityError:
        raise InvalidInput("Payroll already exists for this employee and month")

    loggers.info(f"Payroll #{payroll.id} generated for employee {employee.id} ({month}) by user {actor.id}")
    return payroll


def get_payslip(actor, payroll_id):
    payroll = _get_payroll(payroll_id)
    access.check_payslip_access(actor, payroll)
    return payroll


def delete_payroll(actor, payroll_id):
    deleted, _ = Payroll.objects.filter(pk=payroll_id).delete()
    if not deleted:
        raise NotFound("Payroll record not found")
    loggers.info(f"Payroll #{payroll_id} deleted by user {actor.id}")
