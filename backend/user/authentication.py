from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from .models import User
from .utils.auth import decode_access_token


class JWTAuthentication(BaseAuthentication):
    """Resolves ``Authorization: Bearer <token>`` to the acting ``User``."""

    keyword = "Bearer"

    def authenticate(self, request):
        auth = request.headers.get("Authorization")
        if not auth:
            return None

        parts = auth.split(" ")
        if len(parts) != 2 or parts[0] != self.keyword or not parts[1]:
            raise AuthenticationFailed("Invalid authorization header")

        payload = decode_access_token(parts[1])
        if not payload:
            raise AuthenticationFailed("Invalid token")

        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError):
            raise AuthenticationFailed("Invalid token")

        user = User.objects.filter(id=user_id).first()
        if not user or not user.is_active:
            raise AuthenticationFailed("User not found")

        return user, payload

    def authenticate_header(self, request):
        return self.keyword
