"""Создаёт админа из ADMIN_USERNAME / ADMIN_PASSWORD (один раз после развёртывания).

    python -m scripts.init_admin
"""
import asyncio
import logging

from fincalc.core.config import settings
from fincalc.core.db import get_pool, close_pool, session_factory
from fincalc.db.sql import DDL
from fincalc.services.admins import ensure_admin


logger = logging.getLogger("init_admin")


async def main() -> None:
    pool = await get_pool()
    async with pool.acquire() as conn:
        await conn.execute(DDL)
    await close_pool()

    async with session_factory()() as session:
        created = await ensure_admin(session, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)

    if created:
        logger.info("Admin user %s created; change the password after first login", settings.ADMIN_USERNAME)
    else:
        logger.warning("Admin user %s already exists, nothing to do", settings.ADMIN_USERNAME)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(main())
