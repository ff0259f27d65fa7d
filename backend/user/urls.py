from django.urls import path
from .views import (
    login_user,
    logout_user,
    register_user,
    UserListView,
    UserDetailView,
    EmployeeListView,
    EmployeeDetailView,
    get_current_employee,
    DepartmentListView,
    DepartmentDetailView,
)

urlpatterns = [
    path("auth/login/", login_user, name="auth-login"),
    path("auth/logout/", logout_user, name="auth-logout"),
    path("auth/register/", register_user, name="auth-register"),
    path("users/", UserListView.as_view(), name="user-list"),
    path("users/<int:user_id>/", UserDetailView.as_view(), name="user-detail"),
    path("employees/", EmployeeListView.as_view(), name="employee-list"),
    path("employees/current/", get_current_employee, name="employee-current"),
    path("employees/<int:employee_id>/", EmployeeDetailView.as_view(), name="employee-detail"),
    path("departments/", DepartmentListView.as_view(), name="department-list"),
    path("departments/<int:department_id>/", DepartmentDetailView.as_view(), name="department-detail"),
]
