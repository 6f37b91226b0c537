from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError, jwt

from fincalc.core.config import settings
from fincalc.core.errors import AuthError


# auto_error=False: отсутствие заголовка обрабатываем сами, чтобы отдать 401, а не 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AdminClaims:
    admin_id: int
    username: str


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        # битый хеш в базе
        return False


def create_jwt_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXP_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_jwt_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise AuthError("Token expired", reason="expired")
    except JWTError:
        raise AuthError("Invalid token", reason="invalid")


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AdminClaims:
    if credentials is None or not credentials.credentials:
        raise AuthError("No token provided", reason="missing")

    payload = decode_jwt_token(credentials.credentials)
    admin_id = payload.get("sub")
    username = payload.get("username")
    if admin_id is None or username is None:
        raise AuthError("Invalid token", reason="invalid")

    try:
        return AdminClaims(admin_id=int(admin_id), username=username)
    except (TypeError, ValueError):
        raise AuthError("Invalid token", reason="invalid")
