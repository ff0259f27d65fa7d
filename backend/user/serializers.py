from rest_framework import serializers
from .models import User, Employee, Department
from .roles import Role


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()


class CreateUserSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=100)
    email = serializers.EmailField(max_length=150)
    password = serializers.CharField(min_length=6)
    role = serializers.ChoiceField(choices=Role.choices)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already exists")
        return value


class UpdateUserSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=100, required=False)
    email = serializers.EmailField(max_length=150, required=False)
    password = serializers.CharField(min_length=6, required=False, allow_blank=True)
    role = serializers.ChoiceField(choices=Role.choices, required=False)
    is_active = serializers.BooleanField(required=False)

    def validate_email(self, value):
        user_id = self.context.get("user_id")
        if User.objects.filter(email__iexact=value).exclude(id=user_id).exists():
            raise serializers.ValidationError("Email already exists")
        return value


class UserRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username"]


class UserSerializer(serializers.ModelSerializer):
    creator = UserRefSerializer(source="created_by", read_only=True)
    updater = UserRefSerializer(source="updated_by", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "is_active",
            "created_at",
            "updated_at",
            "created_by",
            "updated_by",
            "creator",
            "updater",
        ]


class DepartmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ["id", "department_name", "description"]


class EmployeeWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = [
            "first_name",
            "last_name",
            "dob",
            "gender",
            "phone",
            "address",
            "joining_date",
            "department",
            "designation",
            "salary",
            "status",
            "is_experienced",
            "previous_company",
            "previous_salary",
            "next_increment",
        ]

    def validate(self, attrs):
        # previous employment is only kept for experienced hires
        is_experienced = attrs.get(
            "is_experienced",
            self.instance.is_experienced if self.instance else False
        )
        if not is_experienced:
            attrs["previous_company"] = None
            attrs["previous_salary"] = None
        return attrs


class EmployeeCreateSerializer(EmployeeWriteSerializer):
    user_id = serializers.IntegerField()

    class Meta(EmployeeWriteSerializer.Meta):
        fields = ["user_id"] + EmployeeWriteSerializer.Meta.fields


class EmployeeSerializer(serializers.ModelSerializer):
    user = serializers.SerializerMethodField()
    department = DepartmentSerializer(read_only=True)

    class Meta:
        model = Employee
        fields = [
            "id",
            "user_id",
            "user",
            "first_name",
            "last_name",
            "dob",
            "gender",
            "phone",
            "address",
            "joining_date",
            "department",
            "designation",
            "salary",
            "status",
            "is_experienced",
            "previous_company",
            "previous_salary",
            "next_increment",
        ]

    def get_user(self, obj):
        return {
            "id": obj.user.id,
            "username": obj.user.username,
            "email": obj.user.email,
            "role": obj.user.role,
        }


class EmployeeListSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    email = serializers.CharField(source="user.email", read_only=True)
    role = serializers.CharField(source="user.role", read_only=True)
    department = serializers.CharField(source="department.department_name", read_only=True, default=None)

    class Meta:
        model = Employee
        fields = [
            "id",
            "user_id",
            "name",
            "first_name",
            "last_name",
            "email",
            "role",
            "department",
            "designation",
            "salary",
            "status",
            "joining_date",
            "next_increment",
            "is_experienced",
            "previous_company",
            "previous_salary",
        ]

    def get_name(self, obj):
        return obj.full_name or "N/A"
