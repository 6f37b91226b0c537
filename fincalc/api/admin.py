from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.core.db import get_session
from fincalc.core.security import AdminClaims, get_current_admin
from fincalc.schemas.admin import LoginRequest, LoginResponse
from fincalc.schemas.quiz import QuizSetIn, QuizSetOut, QuizSetUpdate
from fincalc.services.admins import authenticate
from fincalc.services.quiz_chain import StepRole, step_link
from fincalc.services.quiz_sets import (
    create_quiz_set,
    delete_quiz_set,
    get_quiz_set,
    list_quiz_sets,
    toggle_quiz_set,
    update_quiz_set,
)


router = APIRouter(prefix="/api/admin", tags=["admin"])


def _dump(quiz) -> dict:
    return QuizSetOut.model_validate(quiz).model_dump(mode="json")


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_session)):
    admin, token = await authenticate(session, payload.username, payload.password)
    return LoginResponse(token=token, username=admin.username)


@router.get("/quizzes")
@router.get("/quiz")
async def list_quizzes(
    session: AsyncSession = Depends(get_session),
    admin: AdminClaims = Depends(get_current_admin),
):
    quizzes = await list_quiz_sets(session)
    return {"success": True, "quizzes": [_dump(q) for q in quizzes]}


@router.get("/quiz/{quiz_id}")
async def get_quiz(
    quiz_id: int,
    session: AsyncSession = Depends(get_session),
    admin: AdminClaims = Depends(get_current_admin),
):
    quiz = await get_quiz_set(session, quiz_id)
    return {"success": True, "quiz": _dump(quiz)}


@router.post("/quiz", status_code=status.HTTP_201_CREATED)
async def create_quiz(
    payload: QuizSetIn,
    session: AsyncSession = Depends(get_session),
    admin: AdminClaims = Depends(get_current_admin),
):
    quiz = await create_quiz_set(session, payload)
    return {
        "success": True,
        "message": "Quiz created successfully",
        "quizId": quiz.id,
        "quiz_1_id": quiz.quiz_1_id,
        "entryLink": step_link(StepRole.SLOT1, quiz.quiz_1_id),
    }


@router.put("/quiz/{quiz_id}")
async def update_quiz(
    quiz_id: int,
    payload: QuizSetUpdate,
    session: AsyncSession = Depends(get_session),
    admin: AdminClaims = Depends(get_current_admin),
):
    await update_quiz_set(session, quiz_id, payload)
    return {"success": True, "message": "Quiz updated successfully"}


@router.delete("/quiz/{quiz_id}")
async def delete_quiz(
    quiz_id: int,
    session: AsyncSession = Depends(get_session),
    admin: AdminClaims = Depends(get_current_admin),
):
    await delete_quiz_set(session, quiz_id)
    return {"success": True, "message": "Quiz deleted successfully"}


@router.patch("/quiz/{quiz_id}/toggle")
async def toggle_quiz(
    quiz_id: int,
    session: AsyncSession = Depends(get_session),
    admin: AdminClaims = Depends(get_current_admin),
):
    quiz = await toggle_quiz_set(session, quiz_id)
    return {
        "success": True,
        "message": "Quiz status toggled successfully",
        "is_active": quiz.is_active,
    }
