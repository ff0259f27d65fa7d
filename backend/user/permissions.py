from rest_framework.permissions import BasePermission

from .roles import as_role


class IsAuthenticatedUser(BasePermission):

    def has_permission(self, request, view):
        return bool(
            request.user is not None
            and getattr(request.user, "is_authenticated", False)
        )


def allow_roles(*roles):
    """Permission class admitting authenticated users holding one of ``roles``."""
    allowed = frozenset(role for group in roles for role in (
        group if isinstance(group, (set, frozenset, list, tuple)) else (group,)
    ))

    class HasRole(IsAuthenticatedUser):
        message = "You do not have permission to perform this action."

        def has_permission(self, request, view):
            return bool(
                super().has_permission(request, view)
                and as_role(request.user.role) in allowed
            )

    HasRole.__name__ = "Allow" + "".join(sorted(str(r.value) for r in allowed))
    return HasRole
