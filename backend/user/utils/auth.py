from datetime import datetime, timedelta, timezone
from django.conf import settings
from django.contrib.auth.hashers import make_password, check_password
from jose import jwt, JWTError

ALGORITHM = "HS256"

# =============================
#     PASSWORD HASH / VERIFY
# =============================
def hash_password(password: str):
    return make_password(password)

def verify_password(password: str, hashed_password: str):
    return check_password(password, hashed_password)

# =============================
#     CREATE TOKEN (JWT)
# =============================
def create_token(user):
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=getattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", 60)
    )
    to_encode = {
        "sub": str(user.id),
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=ALGORITHM)

# =============================
#     DECODE TOKEN
# =============================
def decode_access_token(token: str):
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
