import itertools
from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from lms.models import LeaveRequest, LeaveStatus
from requisition.models import Request
from user.models import Employee, User
from user.roles import Role
from user.utils.auth import create_token, hash_password

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make_user(role=Role.EMPLOYEE, with_profile=True, email=None, is_active=True, department=None):
        n = next(counter)
        slug = role.lower()
        user = User.objects.create(
            username=f"{slug}{n}",
            email=email or f"{slug}{n}@example.com",
            hashed_password=hash_password(PASSWORD),
            role=role,
            is_active=is_active,
        )
        if with_profile:
            Employee.objects.create(
                user=user,
                first_name=slug.capitalize(),
                last_name=str(n),
                joining_date=date(2024, 1, 1),
                designation="Staff",
                salary=Decimal("50000.00"),
                department=department,
            )
        return user

    return _make_user


@pytest.fixture
def client_for():
    def _client_for(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {create_token(user)}")
        return client

    return _client_for


@pytest.fixture
def make_leave(db):
    def _make_leave(user, start=date(2025, 3, 10), end=date(2025, 3, 12), status=LeaveStatus.PENDING):
        return LeaveRequest.objects.create(
            employee=user.employee,
            leave_type="Casual",
            start_date=start,
            end_date=end,
            reason="Family event",
            status=status,
        )

    return _make_leave


@pytest.fixture
def make_request(db):
    def _make_request(user, status):
        return Request.objects.create(
            requester=user,
            items="Laptop",
            description="Replacement for broken laptop",
            status=status,
        )

    return _make_request
