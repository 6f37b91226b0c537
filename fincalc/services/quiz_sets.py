from __future__ import annotations

import logging
import secrets
import time
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.core.errors import NotFoundError
from fincalc.models.quiz_set import QuizSet
from fincalc.schemas.quiz import QuizSetIn, QuizSetUpdate


logger = logging.getLogger(__name__)


# редактируемые поля (без идентификаторов шагов и плейсхолдеров)
_CONTENT_FIELDS = (
    "quiz_name",
    "question_1_text", "question_1_answer",
    "question_2_text", "question_2_answer",
    "question_3_text", "question_3_answer",
    "result_message", "reward_link",
    "timer_duration", "require_answer",
)


def _suffix() -> str:
    return secrets.token_hex(6)


def generate_step_ids(now_ms: Optional[int] = None) -> dict[str, str]:
    """Четыре публичных id шагов.

    Суффикс у каждого свой, чтобы по id первого шага нельзя было
    собрать id результата.
    """
    ts = now_ms if now_ms is not None else int(time.time() * 1000)
    return {
        "quiz_1_id": f"q1_emi_{ts}_{_suffix()}",
        "quiz_2_id": f"q2_sip_{ts}_{_suffix()}",
        "quiz_3_id": f"q3_swp_{ts}_{_suffix()}",
        "result_id": f"res_{ts}_{_suffix()}",
    }


def apply_payload(quiz: QuizSet, payload: QuizSetIn) -> QuizSet:
    for field in _CONTENT_FIELDS:
        setattr(quiz, field, getattr(payload, field))
    for field, value in payload.placeholders().items():
        setattr(quiz, field, value)
    if isinstance(payload, QuizSetUpdate):
        quiz.is_active = payload.is_active
    return quiz


def new_quiz_set(payload: QuizSetIn, step_ids: Optional[dict[str, str]] = None) -> QuizSet:
    quiz = QuizSet(is_active=True, **(step_ids or generate_step_ids()))
    return apply_payload(quiz, payload)


async def list_quiz_sets(session: AsyncSession) -> list[QuizSet]:
    rows = await session.execute(
        select(QuizSet).order_by(QuizSet.created_at.desc(), QuizSet.id.desc())
    )
    return list(rows.scalars().all())


async def get_quiz_set(session: AsyncSession, quiz_id: int) -> QuizSet:
    quiz = await session.get(QuizSet, quiz_id)
    if quiz is None:
        raise NotFoundError("Quiz not found")
    return quiz


async def create_quiz_set(session: AsyncSession, payload: QuizSetIn) -> QuizSet:
    quiz = new_quiz_set(payload)
    session.add(quiz)
    await session.commit()
    await session.refresh(quiz)
    logger.info("Quiz set %s created (entry step %s)", quiz.id, quiz.quiz_1_id)
    return quiz


async def update_quiz_set(session: AsyncSession, quiz_id: int, payload: QuizSetUpdate) -> QuizSet:
    quiz = await get_quiz_set(session, quiz_id)
    apply_payload(quiz, payload)
    await session.commit()
    await session.refresh(quiz)
    logger.info("Quiz set %s updated", quiz_id)
    return quiz


async def delete_quiz_set(session: AsyncSession, quiz_id: int) -> None:
    quiz = await get_quiz_set(session, quiz_id)
    await session.delete(quiz)
    await session.commit()
    logger.info("Quiz set %s deleted", quiz_id)


async def toggle_quiz_set(session: AsyncSession, quiz_id: int) -> QuizSet:
    quiz = await get_quiz_set(session, quiz_id)
    quiz.is_active = not quiz.is_active
    await session.commit()
    await session.refresh(quiz)
    logger.info("Quiz set %s is_active -> %s", quiz_id, quiz.is_active)
    return quiz
