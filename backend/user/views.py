from django.db import transaction
from django.db.models import RestrictedError
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework import status

from ems.log_app import loggers
from requisition.models import Request
from .models import User, Employee, Department
from .permissions import allow_roles
from .roles import ADMIN_ROLES, ALL_ROLES, Role, as_role
from .serializers import (
    LoginSerializer,
    CreateUserSerializer,
    UpdateUserSerializer,
    UserSerializer,
    DepartmentSerializer,
    EmployeeCreateSerializer,
    EmployeeWriteSerializer,
    EmployeeSerializer,
    EmployeeListSerializer,
)
from .utils.auth import create_token, hash_password, verify_password

USER_VIEWERS = frozenset({Role.ADMIN, Role.HR, Role.MANAGER, Role.SUPERUSER})
EMPLOYEE_VIEWERS = USER_VIEWERS
EMPLOYEE_EDITORS = frozenset({Role.ADMIN, Role.HR, Role.SUPERUSER})
DEPARTMENT_VIEWERS = EMPLOYEE_EDITORS


# =============================
#     AUTH
# =============================
@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def login_user(request):
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    email = serializer.validated_data["email"]
    password = serializer.validated_data["password"]

    user = User.objects.filter(email__iexact=email).first()
    if not user or not user.is_active:
        return Response({"detail": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)

    if not verify_password(password, user.hashed_password):
        return Response({"detail": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)

    loggers.info(f"Login | user {user.id} ({user.role})")

    return Response(
        {
            "token": create_token(user),
            "token_type": "bearer",
            "role": user.role,
        },
        status=status.HTTP_200_OK
    )


@api_view(["POST"])
def logout_user(request):
    return Response({"message": "Logged out"}, status=status.HTTP_200_OK)


def _create_user(request):
    serializer = CreateUserSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    if data["role"] == Role.SUPERUSER and as_role(request.user.role) != Role.SUPERUSER:
        return Response(
            {"detail": "Only Superuser can create a Superuser"},
            status=status.HTTP_403_FORBIDDEN
        )

    user = User.objects.create(
        username=data["username"],
        email=data["email"],
        hashed_password=hash_password(data["password"]),
        role=data["role"],
        created_by=request.user,
    )
    loggers.info(f"User {user.id} ({user.role}) created by user {request.user.id}")

    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@permission_classes([allow_roles(ADMIN_ROLES)])
def register_user(request):
    return _create_user(request)


# =============================
#     USERS
# =============================
class UserListView(APIView):

    def get_permissions(self):
        if self.request.method == "POST":
            return [allow_roles(Role.SUPERUSER)()]
        return [allow_roles(USER_VIEWERS)()]

    def get(self, request):
        users = User.objects.select_related("created_by", "updated_by").order_by("id")
        return Response(UserSerializer(users, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        return _create_user(request)


class UserDetailView(APIView):
    permission_classes = [allow_roles(Role.SUPERUSER)]

    def put(self, request, user_id):
        user = User.objects.filter(id=user_id).first()
        if not user:
            return Response({"detail": "User not found"}, status=status.HTTP_404_NOT_FOUND)

        serializer = UpdateUserSerializer(data=request.data, context={"user_id": user.id})
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        for field in ("username", "email", "role", "is_active"):
            if field in data:
                setattr(user, field, data[field])

        if data.get("password"):
            user.hashed_password = hash_password(data["password"])

        user.updated_by = request.user
        user.save()
        loggers.info(f"User {user.id} updated by user {request.user.id}")

        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    def delete(self, request, user_id):
        user = User.objects.filter(id=user_id).first()
        if not user:
            return Response({"detail": "User not found"}, status=status.HTTP_404_NOT_FOUND)

        if user.id == request.user.id:
            return Response({"detail": "You cannot delete yourself"}, status=status.HTTP_403_FORBIDDEN)

        try:
            with transaction.atomic():
                user.delete()
        except RestrictedError:
            return Response(
                {"detail": "User has recorded approvals or reviews; deactivate the account instead"},
                status=status.HTTP_400_BAD_REQUEST
            )

        loggers.info(f"User {user_id} deleted by user {request.user.id}")

        return Response({"message": "User deleted successfully"}, status=status.HTTP_200_OK)


# =============================
#     EMPLOYEES
# =============================
class EmployeeListView(APIView):

    def get_permissions(self):
        if self.request.method == "POST":
            return [allow_roles(EMPLOYEE_EDITORS)()]
        return [allow_roles(EMPLOYEE_VIEWERS)()]

    def get(self, request):
        employees = Employee.objects.select_related("user", "department").order_by("id")
        return Response(EmployeeListSerializer(employees, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = EmployeeCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user_id = serializer.validated_data["user_id"]
        if not User.objects.filter(id=user_id).exists():
            return Response({"detail": "User not found"}, status=status.HTTP_404_NOT_FOUND)

        if Employee.objects.filter(user_id=user_id).exists():
            return Response(
                {"detail": "User is already assigned to an employee"},
                status=status.HTTP_400_BAD_REQUEST
            )

        employee = serializer.save()
        loggers.info(f"Employee {employee.id} created for user {user_id} by user {request.user.id}")

        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([allow_roles(ALL_ROLES)])
def get_current_employee(request):
    employee = (
        Employee.objects
        .select_related("user", "department")
        .filter(user_id=request.user.id)
        .first()
    )
    if not employee:
        return Response({"detail": "Employee profile not found"}, status=status.HTTP_404_NOT_FOUND)

    return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)


class EmployeeDetailView(APIView):
    permission_classes = [allow_roles(EMPLOYEE_EDITORS)]

    def _get_employee(self, employee_id):
        return (
            Employee.objects
            .select_related("user", "department")
            .filter(id=employee_id)
            .first()
        )

    def get(self, request, employee_id):
        employee = self._get_employee(employee_id)
        if not employee:
            return Response({"detail": "Employee not found"}, status=status.HTTP_404_NOT_FOUND)

        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    def put(self, request, employee_id):
        employee = self._get_employee(employee_id)
        if not employee:
            return Response({"detail": "Employee not found"}, status=status.HTTP_404_NOT_FOUND)

        serializer = EmployeeWriteSerializer(employee, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        employee = serializer.save()
        loggers.info(f"Employee {employee.id} updated by user {request.user.id}")

        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    def delete(self, request, employee_id):
        employee = self._get_employee(employee_id)
        if not employee:
            return Response({"detail": "Employee not found"}, status=status.HTTP_404_NOT_FOUND)

        with transaction.atomic():
            # leave rows cascade by employee_id; requests hang off the owning user
            Request.objects.filter(requester_id=employee.user_id).delete()
            employee.delete()

        loggers.info(f"Employee {employee_id} deleted by user {request.user.id}")

        return Response({"message": "Employee deleted successfully"}, status=status.HTTP_200_OK)


# =============================
#     DEPARTMENTS
# =============================
class DepartmentListView(APIView):

    def get_permissions(self):
        if self.request.method == "POST":
            return [allow_roles(ADMIN_ROLES)()]
        return [allow_roles(DEPARTMENT_VIEWERS)()]

    def get(self, request):
        departments = Department.objects.order_by("id")
        return Response(DepartmentSerializer(departments, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = DepartmentSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        department = serializer.save()
        return Response(DepartmentSerializer(department).data, status=status.HTTP_201_CREATED)


class DepartmentDetailView(APIView):
    permission_classes = [allow_roles(ADMIN_ROLES)]

    def get(self, request, department_id):
        department = Department.objects.filter(id=department_id).first()
        if not department:
            return Response({"detail": "Department not found"}, status=status.HTTP_404_NOT_FOUND)

        return Response(DepartmentSerializer(department).data, status=status.HTTP_200_OK)

    def put(self, request, department_id):
        department = Department.objects.filter(id=department_id).first()
        if not department:
            return Response({"detail": "Department not found"}, status=status.HTTP_404_NOT_FOUND)

        serializer = DepartmentSerializer(department, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        department = serializer.save()
        return Response(DepartmentSerializer(department).data, status=status.HTTP_200_OK)

    def delete(self, request, department_id):
        department = Department.objects.filter(id=department_id).first()
        if not department:
            return Response({"detail": "Department not found"}, status=status.HTTP_404_NOT_FOUND)

        employee_count = Employee.objects.filter(department=department).count()
        if employee_count > 0:
            return Response(
                {"detail": f"Cannot delete department: {employee_count} employee(s) are assigned to it"},
                status=status.HTTP_400_BAD_REQUEST
            )

        department.delete()
        return Response({"message": "Department deleted successfully"}, status=status.HTTP_200_OK)
