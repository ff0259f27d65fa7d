"""
Resource-request workflow.

    Pending Manager --manager approve--> Pending Admin --admin approve--> Approved
          |                                   |
          +--manager reject--> Rejected <-----+--admin reject

Requests raised by a Manager start at Pending Admin. Each stage writes its
own audit quadruple (approved, reason, approved_by, approved_at) once, via a
conditional update on the stage's pending status.
"""
from django.utils import timezone
from rest_framework.exceptions import NotFound

from ems import access
from ems.exceptions import InvalidInput, InvalidState
from ems.log_app import loggers
from .models import Request


def _get_request(request_id):
    request_obj = Request.objects.filter(pk=request_id).first()
    if not request_obj:
        raise NotFound("Request not found")
    return request_obj


def _require_text(value, message):
    if value is None or not str(value).strip():
        raise InvalidInput(message)
    return str(value).strip()


def list_requests(actor):
    return (
        Request.objects
        .select_related(
            "requester__employee",
            "manager_approved_by",
            "admin_approved_by",
        )
        .filter(access.request_filter(actor))
    )


def create_request(actor, items, description):
    items = _require_text(items, "Items are required")
    description = _require_text(description, "Description is required")

    request_obj = Request.objects.create(
        requester=actor,
        items=items,
        description=description,
        status=access.initial_request_status(actor.role),
    )
    loggers.info(f"Request #{request_obj.id} created by user {actor.id} ({actor.role}) -> {request_obj.status}")
    return request_obj


def manager_approve(request_id, actor):
    return _decide_stage(request_id, actor, "manager_approve")


def manager_reject(request_id, actor, reason):
    reason = _require_text(reason, "Rejection reason required")
    return _decide_stage(request_id, actor, "manager_reject", reason=reason)


def admin_approve(request_id, actor):
    return _decide_stage(request_id, actor, "admin_approve")


def admin_reject(request_id, actor, reason):
    reason = _require_text(reason, "Rejection reason required")
    return _decide_stage(request_id, actor, "admin_reject", reason=reason)


def _decide_stage(request_id, actor, action, reason=None):
    request_obj = _get_request(request_id)
    rule = access.check_stage_action(actor, request_obj, action)

    prefix = rule.stage
    changes = {
        "status": rule.target,
        f"{prefix}_approved": rule.approved,
        f"{prefix}_approved_by": actor,
        f"{prefix}_approved_at": timezone.now(),
        "updated_at": timezone.now(),
    }
    if reason is not None:
        changes[f"{prefix}_reason"] = reason

    updated = Request.objects.filter(pk=request_obj.pk, status=rule.source).update(**changes)
    if not updated:
        raise InvalidState(f"Request not in {rule.source.label.lower()} state")

    request_obj.refresh_from_db()
    loggers.info(
        f"Request #{request_obj.id} {action} by user {actor.id} ({actor.role}) -> {request_obj.status}"
    )
    return request_obj


def update_request(request_id, actor, items, description):
    items = _require_text(items, "Items are required")
    description = _require_text(description, "Description is required")

    request_obj = _get_request(request_id)
    expected = access.check_creator_control(actor, request_obj, "edit")

    requests = Request.objects.filter(pk=request_obj.pk)
    if expected is not None:
        requests = requests.filter(status=expected)

    updated = requests.update(items=items, description=description, updated_at=timezone.now())
    if not updated:
        _raise_lost_race(expected)

    request_obj.refresh_from_db()
    loggers.info(f"Request #{request_obj.id} edited by user {actor.id} ({actor.role})")
    return request_obj


def delete_request(request_id, actor):
    request_obj = _get_request(request_id)
    expected = access.check_creator_control(actor, request_obj, "delete")

    requests = Request.objects.filter(pk=request_obj.pk)
    if expected is not None:
        requests = requests.filter(status=expected)

    deleted, _ = requests.delete()
    if not deleted:
        _raise_lost_race(expected)

    loggers.info(f"Request #{request_id} deleted by user {actor.id} ({actor.role})")


def _raise_lost_race(expected):
    if expected is None:
        raise NotFound("Request not found")
    raise InvalidState(f"Request is no longer {expected.label}")
