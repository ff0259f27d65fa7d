"""
Leave workflow: apply, decide (approve / reject), list, delete and the
monthly approved-dates query.

Decisions are written with a conditional update on the expected prior
status, so two approvers racing on the same Pending leave cannot both win.
"""
from django.utils import timezone
from rest_framework.exceptions import NotFound

from ems import access
from ems.exceptions import InvalidInput, InvalidState
from ems.log_app import loggers
from user.models import Employee
from .models import LeaveRequest, LeaveStatus
from .utils.leave_utils import dates_within, month_bounds
from .utils.notifications import send_notification


def get_employee_profile(user):
    employee = Employee.objects.filter(user_id=user.id).first()
    if not employee:
        raise NotFound("Employee profile not found")
    return employee


def apply_leave(user, leave_type, start_date, end_date, reason):
    if not (leave_type and start_date and end_date and reason):
        raise InvalidInput("All fields are required")

    if start_date > end_date:
        raise InvalidInput("Start date cannot be after end date")

    employee = get_employee_profile(user)

    leave = LeaveRequest.objects.create(
        employee=employee,
        leave_type=leave_type,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
        status=LeaveStatus.PENDING,
    )
    loggers.info(f"Leave #{leave.id} applied by user {user.id} ({start_date}..{end_date})")

    send_notification(
        user.email,
        "Leave Application Submitted",
        f"Your leave request from {start_date} to {end_date} has been submitted and is pending approval."
    )
    return leave


def approve_leave(leave_id, actor):
    return _decide(leave_id, actor, "approve")


def reject_leave(leave_id, actor, reason=None):
    return _decide(leave_id, actor, "reject", reason=reason)


def _decide(leave_id, actor, action, reason=None):
    leave = (
        LeaveRequest.objects
        .select_related("employee__user")
        .filter(pk=leave_id)
        .first()
    )
    if not leave:
        raise NotFound("Leave request not found")

    owner = leave.employee.user
    source, target = access.check_leave_decision(actor, owner, action)

    changes = {
        "status": target,
        "action_by": actor,
        "action_at": timezone.now(),
    }
    if action == "reject":
        changes["reject_reason"] = reason.strip() if reason and reason.strip() else None

    updated = LeaveRequest.objects.filter(pk=leave.pk, status=source).update(**changes)
    if not updated:
        raise InvalidState(f"Leave request is not {source.label.lower()}")

    leave.refresh_from_db()
    loggers.info(f"Leave #{leave.id} {target.label.lower()} by user {actor.id} ({actor.role})")

    send_notification(
        owner.email,
        f"Leave Request {target.label}",
        f"Your leave request from {leave.start_date} to {leave.end_date} has been "
        f"{target.label.upper()} by a {actor.role}."
    )
    return leave


def list_leaves(actor):
    leaves = LeaveRequest.objects.select_related("employee__user", "action_by")
    scope = access.leave_scope(actor)

    if scope == access.OWN:
        employee = get_employee_profile(actor)
        return leaves.filter(employee=employee)

    return leaves.filter(access.owner_role_filter(scope))


def get_leave(actor, leave_id):
    leave = list_leaves(actor).filter(pk=leave_id).first()
    if not leave:
        raise NotFound("Leave request not found")
    return leave


def delete_leave(leave_id):
    deleted, _ = LeaveRequest.objects.filter(pk=leave_id).delete()
    if not deleted:
        raise NotFound("Leave request not found")
    loggers.info(f"Leave #{leave_id} deleted")


def monthly_approved_dates(employee_id, month):
    try:
        first_day, last_day = month_bounds(month)
    except ValueError as e:
        raise InvalidInput(str(e))

    intervals = LeaveRequest.objects.filter(
        employee_id=employee_id,
        status=LeaveStatus.APPROVED,
        start_date__lte=last_day,
        end_date__gte=first_day,
    ).values_list("start_date", "end_date")

    return dates_within(intervals, first_day, last_day)
