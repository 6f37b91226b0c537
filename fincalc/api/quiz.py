from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.core.db import get_session
from fincalc.schemas.quiz import QuizSetSummary, StepView
from fincalc.services.quiz_chain import list_active, resolve_step


router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.get("")
async def get_active_quizzes(session: AsyncSession = Depends(get_session)):
    quizzes = await list_active(session)
    return {
        "success": True,
        "quizzes": [QuizSetSummary.model_validate(q).model_dump(mode="json") for q in quizzes],
    }


@router.get("/{step_id}", response_model=StepView, response_model_exclude_none=True)
async def get_step(step_id: str, session: AsyncSession = Depends(get_session)):
    # 404, если шаг не найден или набор выключен
    return await resolve_step(session, step_id)
