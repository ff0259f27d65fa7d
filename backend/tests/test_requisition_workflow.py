import pytest

from requisition.models import Request, RequestStatus
from user.roles import Role

PAYLOAD = {"items": "Laptop", "description": "Replacement for broken laptop"}


def test_employee_request_goes_through_both_stages(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)
    manager = make_user(Role.MANAGER)
    admin = make_user(Role.ADMIN, with_profile=False)

    response = client_for(employee).post("/api/requests/", PAYLOAD, format="json")
    assert response.status_code == 201
    request_id = response.data["id"]
    assert response.data["status"] == RequestStatus.PENDING_MANAGER
    assert response.data["requester"]["email"] == employee.email

    response = client_for(manager).put(f"/api/requests/{request_id}/manager/approve/")
    assert response.status_code == 200
    assert response.data["status"] == RequestStatus.PENDING_ADMIN
    assert response.data["manager_approved"] is True
    assert response.data["manager_approver"] == manager.username
    assert response.data["manager_approved_at"] is not None

    response = client_for(admin).put(f"/api/requests/{request_id}/admin/approve/")
    assert response.status_code == 200
    assert response.data["status"] == RequestStatus.APPROVED
    assert response.data["admin_approved"] is True
    assert response.data["admin_approver"] == admin.username
    assert response.data["manager_approver"] == manager.username


def test_manager_request_skips_manager_stage(make_user, client_for):
    manager = make_user(Role.MANAGER)
    other_manager = make_user(Role.MANAGER)

    response = client_for(manager).post("/api/requests/", PAYLOAD, format="json")
    assert response.status_code == 201
    request_id = response.data["id"]
    assert response.data["status"] == RequestStatus.PENDING_ADMIN

    response = client_for(manager).put(f"/api/requests/{request_id}/manager/approve/")
    assert response.status_code == 403
    assert response.data["detail"] == "Cannot approve your own request"

    response = client_for(other_manager).put(f"/api/requests/{request_id}/manager/approve/")
    assert response.status_code == 400
    assert response.data["detail"] == "Request not in pending manager state"

    response = client_for(make_user(Role.SUPERUSER)).put(f"/api/requests/{request_id}/admin/approve/")
    assert response.status_code == 200
    assert response.data["status"] == RequestStatus.APPROVED
    assert response.data["manager_approved"] is None


def test_superuser_request_starts_at_manager_stage(make_user, client_for):
    response = client_for(make_user(Role.SUPERUSER)).post("/api/requests/", PAYLOAD, format="json")
    assert response.status_code == 201
    assert response.data["status"] == RequestStatus.PENDING_MANAGER


@pytest.mark.parametrize("role", [Role.HR, Role.ADMIN])
def test_hr_and_admin_cannot_create(make_user, client_for, role):
    response = client_for(make_user(role)).post("/api/requests/", PAYLOAD, format="json")
    assert response.status_code == 403
    assert not Request.objects.exists()


def test_create_requires_items_and_description(make_user, client_for):
    response = client_for(make_user(Role.EMPLOYEE)).post("/api/requests/", {"items": "Laptop"}, format="json")
    assert response.status_code == 400


def test_manager_reject_requires_reason(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)
    manager = client_for(make_user(Role.MANAGER))

    response = manager.put(f"/api/requests/{request_obj.id}/manager/reject/", {"reason": "   "}, format="json")
    assert response.status_code == 400
    assert response.data["detail"] == "Rejection reason required"
    request_obj.refresh_from_db()
    assert request_obj.status == RequestStatus.PENDING_MANAGER

    response = manager.put(f"/api/requests/{request_obj.id}/manager/reject/", {"reason": "Over budget"}, format="json")
    assert response.status_code == 200
    assert response.data["status"] == RequestStatus.REJECTED
    assert response.data["manager_approved"] is False
    assert response.data["manager_reason"] == "Over budget"


def test_rejected_request_is_terminal(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.REJECTED)
    admin = client_for(make_user(Role.ADMIN, with_profile=False))

    response = admin.put(f"/api/requests/{request_obj.id}/admin/approve/")

    assert response.status_code == 400
    assert response.data["detail"] == "Request not in pending admin state"
    request_obj.refresh_from_db()
    assert request_obj.status == RequestStatus.REJECTED
    assert request_obj.admin_approved is None
    assert request_obj.admin_approved_by_id is None


def test_admin_cannot_act_before_manager_stage(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)
    admin = client_for(make_user(Role.ADMIN, with_profile=False))

    response = admin.put(f"/api/requests/{request_obj.id}/admin/reject/", {"reason": "No"}, format="json")

    assert response.status_code == 400
    request_obj.refresh_from_db()
    assert request_obj.status == RequestStatus.PENDING_MANAGER
    assert request_obj.admin_reason is None


def test_admin_reject_records_audit(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.MANAGER), RequestStatus.PENDING_ADMIN)
    admin = make_user(Role.ADMIN, with_profile=False)

    response = client_for(admin).put(
        f"/api/requests/{request_obj.id}/admin/reject/", {"reason": "Duplicate"}, format="json"
    )

    assert response.status_code == 200
    request_obj.refresh_from_db()
    assert request_obj.status == RequestStatus.REJECTED
    assert request_obj.admin_approved is False
    assert request_obj.admin_reason == "Duplicate"
    assert request_obj.admin_approved_by_id == admin.id


@pytest.mark.parametrize("role, url", [
    (Role.EMPLOYEE, "manager/approve/"),
    (Role.HR, "manager/approve/"),
    (Role.ADMIN, "manager/approve/"),
    (Role.MANAGER, "admin/approve/"),
    (Role.HR, "admin/approve/"),
])
def test_stage_endpoints_are_role_gated(make_user, make_request, client_for, role, url):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)

    response = client_for(make_user(role)).put(f"/api/requests/{request_obj.id}/{url}")

    assert response.status_code == 403
    request_obj.refresh_from_db()
    assert request_obj.status == RequestStatus.PENDING_MANAGER


def test_decision_on_missing_request_is_not_found(make_user, client_for):
    response = client_for(make_user(Role.MANAGER)).put("/api/requests/999/manager/approve/")
    assert response.status_code == 404


def test_employee_edits_only_while_pending_manager(make_user, make_request, client_for):
    employee = make_user(Role.EMPLOYEE)
    request_obj = make_request(employee, RequestStatus.PENDING_MANAGER)
    client = client_for(employee)
    payload = {"items": "Monitor", "description": "Second screen"}

    response = client.put(f"/api/requests/{request_obj.id}/", payload, format="json")
    assert response.status_code == 200
    assert response.data["items"] == "Monitor"

    Request.objects.filter(pk=request_obj.pk).update(status=RequestStatus.PENDING_ADMIN)

    response = client.put(f"/api/requests/{request_obj.id}/", PAYLOAD, format="json")
    assert response.status_code == 400
    request_obj.refresh_from_db()
    assert request_obj.items == "Monitor"


def test_cannot_edit_someone_elses_request(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)

    response = client_for(make_user(Role.EMPLOYEE)).put(f"/api/requests/{request_obj.id}/", PAYLOAD, format="json")

    assert response.status_code == 403


def test_hr_cannot_edit(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)

    response = client_for(make_user(Role.HR)).put(f"/api/requests/{request_obj.id}/", PAYLOAD, format="json")

    assert response.status_code == 403


def test_admin_edits_in_any_state(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.APPROVED)
    payload = {"items": "Chair", "description": "Ergonomic"}

    response = client_for(make_user(Role.ADMIN, with_profile=False)).put(
        f"/api/requests/{request_obj.id}/", payload, format="json"
    )

    assert response.status_code == 200
    request_obj.refresh_from_db()
    assert request_obj.items == "Chair"
    assert request_obj.status == RequestStatus.APPROVED


def test_manager_deletes_own_pending_admin_request(make_user, make_request, client_for):
    manager = make_user(Role.MANAGER)
    request_obj = make_request(manager, RequestStatus.PENDING_ADMIN)

    response = client_for(manager).delete(f"/api/requests/{request_obj.id}/")

    assert response.status_code == 200
    assert not Request.objects.filter(pk=request_obj.pk).exists()


def test_employee_deletes_only_while_pending_manager(make_user, make_request, client_for):
    employee = make_user(Role.EMPLOYEE)
    request_obj = make_request(employee, RequestStatus.PENDING_ADMIN)

    response = client_for(employee).delete(f"/api/requests/{request_obj.id}/")

    assert response.status_code == 400
    assert Request.objects.filter(pk=request_obj.pk).exists()

    Request.objects.filter(pk=request_obj.pk).update(status=RequestStatus.PENDING_MANAGER)

    assert client_for(employee).delete(f"/api/requests/{request_obj.id}/").status_code == 200
    assert not Request.objects.filter(pk=request_obj.pk).exists()


def test_admin_deletes_any_request(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.REJECTED)
    client = client_for(make_user(Role.SUPERUSER))

    assert client.delete(f"/api/requests/{request_obj.id}/").status_code == 200
    assert client.delete(f"/api/requests/{request_obj.id}/").status_code == 404


def test_listing_follows_role_visibility(make_user, make_request, client_for):
    employee = make_user(Role.EMPLOYEE)
    other_employee = make_user(Role.EMPLOYEE)
    manager = make_user(Role.MANAGER)
    other_manager = make_user(Role.MANAGER)

    own = make_request(employee, RequestStatus.PENDING_MANAGER)
    other = make_request(other_employee, RequestStatus.APPROVED)
    managers_own = make_request(manager, RequestStatus.PENDING_ADMIN)
    other_managers = make_request(other_manager, RequestStatus.PENDING_ADMIN)
    everything = {own.id, other.id, managers_own.id, other_managers.id}

    def ids(user):
        response = client_for(user).get("/api/requests/")
        assert response.status_code == 200
        return {row["id"] for row in response.data}

    assert ids(employee) == {own.id}
    assert ids(manager) == {own.id, other.id, managers_own.id}
    assert ids(make_user(Role.HR)) == everything
    assert ids(make_user(Role.ADMIN, with_profile=False)) == everything


def test_second_manager_approval_by_same_manager_fails(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)
    manager = make_user(Role.MANAGER)
    client = client_for(manager)

    assert client.put(f"/api/requests/{request_obj.id}/manager/approve/").status_code == 200
    request_obj.refresh_from_db()
    approved_at = request_obj.manager_approved_at

    response = client.put(f"/api/requests/{request_obj.id}/manager/approve/")

    assert response.status_code == 400
    assert response.data["detail"] == "Request not in pending manager state"
    request_obj.refresh_from_db()
    assert request_obj.status == RequestStatus.PENDING_ADMIN
    assert request_obj.manager_approved_by_id == manager.id
    assert request_obj.manager_approved_at == approved_at


def test_admin_rejection_after_manager_approval_keeps_manager_stage(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)
    manager = make_user(Role.MANAGER)
    admin = make_user(Role.ADMIN, with_profile=False)

    response = client_for(employee).post("/api/requests/", {"items": "mouse", "description": "broken"}, format="json")
    request_id = response.data["id"]
    assert client_for(manager).put(f"/api/requests/{request_id}/manager/approve/").status_code == 200

    response = client_for(admin).put(f"/api/requests/{request_id}/admin/reject/", {"reason": "budget"}, format="json")

    assert response.status_code == 200
    assert response.data["status"] == RequestStatus.REJECTED
    assert response.data["admin_approved"] is False
    assert response.data["admin_reason"] == "budget"
    assert response.data["manager_approved"] is True
    assert response.data["manager_reason"] is None
    assert response.data["manager_approver"] == manager.username


def test_manager_can_decide_superuser_request_missing_from_listing(make_user, make_request, client_for):
    request_obj = make_request(make_user(Role.SUPERUSER), RequestStatus.PENDING_MANAGER)
    manager = client_for(make_user(Role.MANAGER))

    listed = {row["id"] for row in manager.get("/api/requests/").data}
    assert request_obj.id not in listed

    response = manager.put(f"/api/requests/{request_obj.id}/manager/approve/")

    assert response.status_code == 200
    assert response.data["status"] == RequestStatus.PENDING_ADMIN
