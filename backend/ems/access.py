"""
Role rules for the leave, resource-request, attendance, payroll and
performance-review endpoints.

Every workflow operation consults the tables below instead of carrying its
own role conditionals:

- ``LEAVE_DECIDERS``: which owner roles each acting role may approve or
  reject leave for.
- ``LEAVE_VISIBILITY`` / ``REQUEST_VISIBILITY`` / ``ATTENDANCE_VISIBILITY``:
  what each role may list.
- ``REQUEST_STAGE_ACTIONS``: (stage, allowed roles, source status, target
  status) for the four stage decisions of a resource request.
- ``CREATOR_STAGE``: the status in which a non-admin creator still controls
  (may edit or delete) their own request.
- ``PAYSLIP_SELF_ONLY``: roles that may only read their own payslips.
"""
from dataclasses import dataclass

from django.db.models import Q
from rest_framework.exceptions import PermissionDenied

from ems.exceptions import InvalidState
from lms.models import LeaveStatus
from requisition.models import RequestStatus
from user.roles import ADMIN_ROLES, ALL_ROLES, Role, as_role

OWN = "own"

# =============================
#     LEAVE
# =============================
LEAVE_APPLICANTS = frozenset({Role.EMPLOYEE, Role.MANAGER, Role.HR})

LEAVE_DECIDERS = {
    Role.ADMIN: ALL_ROLES,
    Role.SUPERUSER: ALL_ROLES,
    Role.HR: frozenset({Role.EMPLOYEE, Role.MANAGER}),
    Role.MANAGER: frozenset({Role.EMPLOYEE}),
}
LEAVE_DECIDER_ROLES = frozenset(LEAVE_DECIDERS)

LEAVE_TRANSITIONS = {
    "approve": (LeaveStatus.PENDING, LeaveStatus.APPROVED),
    "reject": (LeaveStatus.PENDING, LeaveStatus.REJECTED),
}

# acting role -> OWN, or the owner roles whose leave is listed
LEAVE_VISIBILITY = {
    Role.EMPLOYEE: OWN,
    Role.MANAGER: frozenset({Role.EMPLOYEE, Role.MANAGER}),
    Role.HR: ALL_ROLES,
    Role.ADMIN: ALL_ROLES,
    Role.SUPERUSER: ALL_ROLES,
}


def can_decide_leave(acting_role, owner_role, is_self):
    if is_self:
        return False
    allowed = LEAVE_DECIDERS.get(as_role(acting_role), frozenset())
    return as_role(owner_role) in allowed


def check_leave_decision(actor, owner, action):
    is_self = owner is not None and owner.id == actor.id
    owner_role = owner.role if owner is not None else None
    if not can_decide_leave(actor.role, owner_role, is_self):
        raise PermissionDenied(f"You are not authorized to {action} this leave request")
    return LEAVE_TRANSITIONS[action]


def leave_scope(actor):
    return LEAVE_VISIBILITY.get(as_role(actor.role), frozenset())


def owner_role_filter(roles):
    """Q over ``employee__user__role`` for records owned by an Employee."""
    if roles == ALL_ROLES:
        return Q()
    return Q(employee__user__role__in=[role.value for role in roles])


# =============================
#     RESOURCE REQUESTS
# =============================
REQUEST_CREATORS = frozenset({Role.EMPLOYEE, Role.MANAGER, Role.SUPERUSER})
REQUEST_MANAGERS = frozenset({Role.MANAGER})
REQUEST_ADMINS = ADMIN_ROLES


@dataclass(frozen=True)
class StageAction:
    stage: str
    roles: frozenset
    source: str
    target: str
    approved: bool
    forbid_self: bool


REQUEST_STAGE_ACTIONS = {
    "manager_approve": StageAction(
        "manager", REQUEST_MANAGERS,
        RequestStatus.PENDING_MANAGER, RequestStatus.PENDING_ADMIN,
        approved=True, forbid_self=True,
    ),
    "manager_reject": StageAction(
        "manager", REQUEST_MANAGERS,
        RequestStatus.PENDING_MANAGER, RequestStatus.REJECTED,
        approved=False, forbid_self=True,
    ),
    "admin_approve": StageAction(
        "admin", REQUEST_ADMINS,
        RequestStatus.PENDING_ADMIN, RequestStatus.APPROVED,
        approved=True, forbid_self=False,
    ),
    "admin_reject": StageAction(
        "admin", REQUEST_ADMINS,
        RequestStatus.PENDING_ADMIN, RequestStatus.REJECTED,
        approved=False, forbid_self=False,
    ),
}

CREATOR_STAGE = {
    Role.EMPLOYEE: RequestStatus.PENDING_MANAGER,
    Role.MANAGER: RequestStatus.PENDING_ADMIN,
}
REQUEST_EDITORS = ADMIN_ROLES | frozenset(CREATOR_STAGE)

# acting role -> (sees own requests, requester roles also listed); absent = all
REQUEST_VISIBILITY = {
    Role.EMPLOYEE: (True, frozenset()),
    Role.MANAGER: (True, frozenset({Role.EMPLOYEE})),
}


def initial_request_status(creator_role):
    if as_role(creator_role) == Role.MANAGER:
        return RequestStatus.PENDING_ADMIN
    return RequestStatus.PENDING_MANAGER


def check_stage_action(actor, request_obj, action):
    rule = REQUEST_STAGE_ACTIONS[action]
    verb = "approve" if rule.approved else "reject"

    if as_role(actor.role) not in rule.roles:
        raise PermissionDenied(f"Only {_role_list(rule.roles)} can {verb} at the {rule.stage} stage")

    if rule.forbid_self and request_obj.requester_id == actor.id:
        raise PermissionDenied(f"Cannot {verb} your own request")

    return rule


def check_creator_control(actor, request_obj, verb):
    """Returns the status the request must still hold, or None for admins."""
    role = as_role(actor.role)
    if role in ADMIN_ROLES:
        return None

    if request_obj.requester_id != actor.id or role not in CREATOR_STAGE:
        raise PermissionDenied(f"You are not authorized to {verb} this request")

    expected = CREATOR_STAGE[role]
    if request_obj.status != expected:
        raise InvalidState(f"{role.label}s can only {verb} requests while {expected.label}")
    return expected


def request_filter(actor):
    rule = REQUEST_VISIBILITY.get(as_role(actor.role))
    if rule is None:
        return Q()

    include_own, requester_roles = rule
    condition = Q(pk__in=[])
    if include_own:
        condition |= Q(requester_id=actor.id)
    if requester_roles:
        condition |= Q(requester__role__in=[role.value for role in requester_roles])
    return condition


def _role_list(roles):
    return "/".join(sorted(role.value for role in roles))


# =============================
#     ATTENDANCE
# =============================
ATTENDANCE_MARKERS = frozenset({Role.EMPLOYEE, Role.MANAGER, Role.HR, Role.SUPERUSER})
ATTENDANCE_VIEWERS = frozenset({Role.ADMIN, Role.HR, Role.MANAGER, Role.SUPERUSER})

# acting role -> owner roles whose attendance is listed
ATTENDANCE_VISIBILITY = {
    Role.MANAGER: frozenset({Role.EMPLOYEE, Role.MANAGER}),
    Role.HR: ALL_ROLES,
    Role.ADMIN: ALL_ROLES,
    Role.SUPERUSER: ALL_ROLES,
}


def attendance_scope(actor):
    return ATTENDANCE_VISIBILITY.get(as_role(actor.role), frozenset())


# =============================
#     PAYROLL
# =============================
PAYROLL_MANAGERS = frozenset({Role.ADMIN, Role.HR, Role.SUPERUSER})
PAYROLL_DELETERS = frozenset({Role.ADMIN, Role.HR})
PAYSLIP_READERS = PAYROLL_MANAGERS | {Role.EMPLOYEE}
PAYSLIP_SELF_ONLY = frozenset({Role.EMPLOYEE})


def check_payslip_access(actor, payroll):
    if as_role(actor.role) not in PAYSLIP_SELF_ONLY:
        return
    if payroll.employee.user_id != actor.id:
        raise PermissionDenied("You are not authorized to view this payslip")


# =============================
#     PERFORMANCE REVIEWS
# =============================
REVIEW_READERS = frozenset({Role.ADMIN, Role.MANAGER, Role.SUPERUSER})
REVIEW_WRITERS = frozenset({Role.MANAGER, Role.ADMIN})


def check_review_author(actor, employee):
    if employee.user_id == actor.id:
        raise PermissionDenied("You cannot review yourself")


def check_review_editor(actor, review):
    if as_role(actor.role) in ADMIN_ROLES:
        return
    if review.reviewer_id != actor.id:
        raise PermissionDenied("You can only edit reviews you wrote")
