import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fincalc.api import admin, calculators, quiz
from fincalc.core.config import settings
from fincalc.core.db import close_pool, get_pool
from fincalc.core.errors import install_error_handlers
from fincalc.db.sql import DDL


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Financial Calculator Quiz",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(quiz.router)
app.include_router(admin.router)
app.include_router(calculators.router)


@app.get("/")
async def root():
    return {"success": True, "message": "Financial calculator quiz API"}


@app.on_event("startup")
async def startup():
    pool = await get_pool()
    async with pool.acquire() as conn:
        await conn.execute(DDL)
    logger.info("Schema ready; quiz API at /api/quiz, admin API at /api/admin")


@app.on_event("shutdown")
async def shutdown():
    await close_pool()
