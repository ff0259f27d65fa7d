"""
Daily check-in / check-out and the monthly views built on it.

One row per employee per day. Check-in creates the row as Present;
check-out fills ``check_out`` once, through a conditional update.
"""
from django.db import IntegrityError, transaction
from django.utils import timezone

from ems import access
from ems.exceptions import InvalidInput, InvalidState
from ems.log_app import loggers
from lms.services import get_employee_profile, monthly_approved_dates
from lms.utils.leave_utils import month_bounds, parse_day
from .models import Attendance, AttendanceStatus


def _month(month):
    try:
        return month_bounds(month)
    except ValueError as e:
        raise InvalidInput(str(e))


def _clock(now):
    local = timezone.localtime(now)
    return local.date(), local.time().replace(microsecond=0)


def check_in(user, now=None):
    employee = get_employee_profile(user)
    today, clock = _clock(now)

    if Attendance.objects.filter(employee=employee, date=today).exists():
        raise InvalidState("Already checked in today")

    try:
        with transaction.atomic():
            attendance = Attendance.objects.create(
                employee=employee,
                date=today,
                check_in=clock,
                status=AttendanceStatus.PRESENT,
            )
    except IntegrityError:
        raise InvalidState("Already checked in today")

    loggers.info(f"Check-in | employee {employee.id} at {today} {clock}")
    return attendance


def check_out(user, now=None):
    employee = get_employee_profile(user)
    today, clock = _clock(now)

    attendance = Attendance.objects.filter(employee=employee, date=today).first()
    if not attendance:
        raise InvalidState("No check-in record found for today")

    updated = Attendance.objects.filter(pk=attendance.pk, check_out__isnull=True).update(check_out=clock)
    if not updated:
        raise InvalidState("Already checked out today")

    attendance.refresh_from_db()
    loggers.info(f"Check-out | employee {employee.id} at {today} {clock}")
    return attendance


def monthly_attendance(user, month):
    first_day, last_day = _month(month)
    return _own_records(get_employee_profile(user), first_day, last_day)


def monthly_summary(user, month):
    """Present days and approved leave days of the caller's month."""
    first_day, last_day = _month(month)
    employee = get_employee_profile(user)

    present = _own_records(employee, first_day, last_day).filter(status=AttendanceStatus.PRESENT).count()
    leave_dates = monthly_approved_dates(employee.id, month)

    return {
        "month": month,
        "present": present,
        "leave": len(leave_dates),
        "leave_dates": leave_dates,
    }


def _own_records(employee, first_day, last_day):
    return Attendance.objects.filter(
        employee=employee,
        date__gte=first_day,
        date__lte=last_day,
    )


def _visible(actor):
    return (
        Attendance.objects
        .select_related("employee__user")
        .filter(access.owner_role_filter(access.attendance_scope(actor)))
    )


def list_attendance(actor):
    return _visible(actor)


def team_monthly_attendance(actor, month):
    first_day, last_day = _month(month)
    return _visible(actor).filter(date__gte=first_day, date__lte=last_day)


def daily_attendance(actor, day):
    try:
        day = parse_day(day)
    except ValueError as e:
        raise InvalidInput(str(e))

    return _visible(actor).filter(date=day).order_by("employee__first_name", "id")
