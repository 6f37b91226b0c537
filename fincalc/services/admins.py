from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.core.errors import AuthError
from fincalc.core.security import create_jwt_token, hash_password, verify_password
from fincalc.models.admin_user import AdminUser


logger = logging.getLogger(__name__)


async def get_by_username(session: AsyncSession, username: str) -> AdminUser | None:
    result = await session.execute(select(AdminUser).where(AdminUser.username == username))
    return result.scalar_one_or_none()


async def authenticate(session: AsyncSession, username: str, password: str) -> tuple[AdminUser, str]:
    """Проверяет логин/пароль, обновляет last_login и выдаёт JWT на 24 часа."""
    admin = await get_by_username(session, username)
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("Failed admin login for %r", username)
        raise AuthError("Invalid credentials", reason="invalid")

    admin.last_login = datetime.now(timezone.utc)
    await session.commit()

    token = create_jwt_token({"sub": str(admin.id), "username": admin.username})
    logger.info("Admin %s logged in", admin.username)
    return admin, token


async def ensure_admin(session: AsyncSession, username: str, password: str) -> bool:
    """Создаёт админа, если его ещё нет. True — создан, False — уже был."""
    if await get_by_username(session, username) is not None:
        return False

    session.add(AdminUser(username=username, password_hash=hash_password(password)))
    await session.commit()
    logger.info("Admin user %s created", username)
    return True
