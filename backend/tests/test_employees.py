from datetime import date
from decimal import Decimal

import pytest

from attendance.models import Attendance, AttendanceStatus
from lms.models import LeaveRequest, LeaveStatus
from payroll.models import Payroll
from performance.models import PerformanceReview
from requisition.models import Request, RequestStatus
from user.models import Department, Employee, User
from user.roles import Role

EMPLOYEE_PAYLOAD = {
    "first_name": "Asha",
    "last_name": "Verma",
    "joining_date": "2024-04-01",
    "designation": "Engineer",
    "salary": "65000.00",
}


def test_create_employee_profile(make_user, client_for):
    hr = make_user(Role.HR)
    target = make_user(Role.EMPLOYEE, with_profile=False)
    department = Department.objects.create(department_name="Engineering")
    payload = dict(EMPLOYEE_PAYLOAD, user_id=target.id, department=department.id)

    response = client_for(hr).post("/api/employees/", payload, format="json")

    assert response.status_code == 201
    assert response.data["user"]["email"] == target.email
    assert response.data["department"]["department_name"] == "Engineering"
    assert Employee.objects.get(user=target).salary == Decimal("65000.00")


def test_create_employee_for_missing_user(make_user, client_for):
    payload = dict(EMPLOYEE_PAYLOAD, user_id=999)
    response = client_for(make_user(Role.ADMIN, with_profile=False)).post("/api/employees/", payload, format="json")
    assert response.status_code == 404


def test_create_employee_twice_for_same_user(make_user, client_for):
    target = make_user(Role.EMPLOYEE)
    payload = dict(EMPLOYEE_PAYLOAD, user_id=target.id)

    response = client_for(make_user(Role.ADMIN, with_profile=False)).post("/api/employees/", payload, format="json")

    assert response.status_code == 400
    assert Employee.objects.filter(user=target).count() == 1


def test_previous_employment_dropped_for_fresh_hires(make_user, client_for):
    target = make_user(Role.EMPLOYEE, with_profile=False)
    payload = dict(
        EMPLOYEE_PAYLOAD,
        user_id=target.id,
        is_experienced=False,
        previous_company="Acme",
        previous_salary="40000.00",
    )

    response = client_for(make_user(Role.HR)).post("/api/employees/", payload, format="json")

    assert response.status_code == 201
    assert response.data["previous_company"] is None
    assert response.data["previous_salary"] is None


def test_previous_employment_kept_for_experienced_hires(make_user, client_for):
    target = make_user(Role.EMPLOYEE, with_profile=False)
    payload = dict(
        EMPLOYEE_PAYLOAD,
        user_id=target.id,
        is_experienced=True,
        previous_company="Acme",
        previous_salary="40000.00",
    )

    response = client_for(make_user(Role.HR)).post("/api/employees/", payload, format="json")

    assert response.status_code == 201
    assert response.data["previous_company"] == "Acme"


@pytest.mark.parametrize("role, expected", [
    (Role.MANAGER, 200),
    (Role.HR, 200),
    (Role.EMPLOYEE, 403),
])
def test_list_employees_by_role(make_user, client_for, role, expected):
    make_user(Role.EMPLOYEE)
    response = client_for(make_user(role)).get("/api/employees/")
    assert response.status_code == expected


def test_list_employees_is_flat(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)

    response = client_for(make_user(Role.MANAGER)).get("/api/employees/")

    row = next(item for item in response.data if item["user_id"] == employee.id)
    assert row["email"] == employee.email
    assert row["role"] == "Employee"
    assert row["department"] is None


def test_current_employee(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)

    response = client_for(employee).get("/api/employees/current/")
    assert response.status_code == 200
    assert response.data["id"] == employee.employee.id

    response = client_for(make_user(Role.ADMIN, with_profile=False)).get("/api/employees/current/")
    assert response.status_code == 404


def test_get_employee_by_id(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)
    url = f"/api/employees/{employee.employee.id}/"

    assert client_for(make_user(Role.HR)).get(url).status_code == 200
    assert client_for(make_user(Role.MANAGER)).get(url).status_code == 403
    assert client_for(make_user(Role.HR)).get("/api/employees/999/").status_code == 404


def test_partial_update_employee(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)

    response = client_for(make_user(Role.HR)).put(
        f"/api/employees/{employee.employee.id}/", {"designation": "Lead"}, format="json"
    )

    assert response.status_code == 200
    employee.employee.refresh_from_db()
    assert employee.employee.designation == "Lead"
    assert employee.employee.first_name == "Employee"


def test_delete_employee_removes_leaves_and_requests(make_user, make_leave, make_request, client_for):
    employee = make_user(Role.EMPLOYEE)
    profile_id = employee.employee.id
    make_leave(employee, status=LeaveStatus.APPROVED)
    make_request(employee, RequestStatus.PENDING_MANAGER)
    keep = make_request(make_user(Role.EMPLOYEE), RequestStatus.PENDING_MANAGER)

    response = client_for(make_user(Role.ADMIN, with_profile=False)).delete(f"/api/employees/{profile_id}/")

    assert response.status_code == 200
    assert not Employee.objects.filter(pk=profile_id).exists()
    assert not LeaveRequest.objects.filter(employee_id=profile_id).exists()
    assert not Request.objects.filter(requester=employee).exists()
    assert Request.objects.filter(pk=keep.pk).exists()
    assert User.objects.filter(pk=employee.pk).exists()


def test_delete_employee_removes_attendance_payroll_and_reviews(make_user, client_for):
    employee = make_user(Role.EMPLOYEE)
    manager = make_user(Role.MANAGER)
    profile = employee.employee
    Attendance.objects.create(employee=profile, date=date(2025, 2, 3), status=AttendanceStatus.PRESENT)
    Payroll.objects.create(
        employee=profile, month="2025-02", net_salary=Decimal("100.00"), payment_date=date(2025, 2, 28)
    )
    PerformanceReview.objects.create(employee=profile, reviewer=manager, rating=4, feedback="ok", review_month="2025-02")

    response = client_for(make_user(Role.HR)).delete(f"/api/employees/{profile.id}/")

    assert response.status_code == 200
    assert not Attendance.objects.filter(employee_id=profile.id).exists()
    assert not Payroll.objects.filter(employee_id=profile.id).exists()
    assert not PerformanceReview.objects.filter(employee_id=profile.id).exists()
    assert User.objects.filter(pk=manager.pk).exists()
