"""Цепочка шагов квиза.

У каждого набора четыре непрозрачных идентификатора шага (слоты 1..3 и
результат). Посетитель приходит на страницу калькулятора с ?quizid=<id>,
по нему находим набор и роль шага, отдаём вопрос и id следующего шага.
Сервер ничего не хранит про прогресс: каждый запрос самодостаточен.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fincalc.core.errors import NotFoundError
from fincalc.models.quiz_set import QuizSet
from fincalc.schemas.quiz import StepView


logger = logging.getLogger(__name__)


class StepRole(str, Enum):
    SLOT1 = "slot1"
    SLOT2 = "slot2"
    SLOT3 = "slot3"
    RESULT = "result"

    @property
    def page_type(self) -> str:
        return _PAGE_TYPES[self]

    @property
    def page_route(self) -> str:
        return _PAGE_ROUTES[self]

    @property
    def next_role(self) -> Optional["StepRole"]:
        return _NEXT_ROLE.get(self)

    @property
    def slot_number(self) -> Optional[int]:
        return _SLOT_NUMBERS.get(self)


_PAGE_TYPES = {
    StepRole.SLOT1: "emi",
    StepRole.SLOT2: "sip",
    StepRole.SLOT3: "swp",
    StepRole.RESULT: "results",
}

_PAGE_ROUTES = {
    StepRole.SLOT1: "/emi-calculator.html",
    StepRole.SLOT2: "/sip-calculator.html",
    StepRole.SLOT3: "/swp-calculator.html",
    StepRole.RESULT: "/quiz-results.html",
}

_NEXT_ROLE = {
    StepRole.SLOT1: StepRole.SLOT2,
    StepRole.SLOT2: StepRole.SLOT3,
    StepRole.SLOT3: StepRole.RESULT,
}

_SLOT_NUMBERS = {
    StepRole.SLOT1: 1,
    StepRole.SLOT2: 2,
    StepRole.SLOT3: 3,
}

# колонки идентификаторов в порядке проверки
_STEP_COLUMNS = (
    (StepRole.SLOT1, "quiz_1_id"),
    (StepRole.SLOT2, "quiz_2_id"),
    (StepRole.SLOT3, "quiz_3_id"),
    (StepRole.RESULT, "result_id"),
)


def step_slots(quiz: QuizSet) -> tuple[tuple[StepRole, str], ...]:
    return tuple((role, getattr(quiz, column)) for role, column in _STEP_COLUMNS)


def token_for(quiz: QuizSet, role: StepRole) -> str:
    return dict(step_slots(quiz))[role]


def role_of(quiz: QuizSet, step_id: str) -> Optional[StepRole]:
    """Роль шага по точному совпадению; первый совпавший слот выигрывает."""
    for role, token in step_slots(quiz):
        if token == step_id:
            return role
    return None


def step_link(role: StepRole, token: str) -> str:
    return f"{role.page_route}?quizid={token}"


def build_step_view(quiz: QuizSet, step_id: str) -> StepView:
    role = role_of(quiz, step_id)
    if role is None:
        raise NotFoundError("Quiz not found or inactive")

    common = dict(
        quiz_name=quiz.quiz_name,
        timer_duration=quiz.timer_duration,
        require_answer=bool(quiz.require_answer),
        page_type=role.page_type,
    )

    if role is StepRole.RESULT:
        return StepView(
            **common,
            result_message=quiz.result_message,
            reward_link=quiz.reward_link,
        )

    n = role.slot_number
    next_role = role.next_role
    return StepView(
        **common,
        question_text=getattr(quiz, f"question_{n}_text"),
        placeholder=getattr(quiz, f"question_{n}_placeholder"),
        next_step_id=token_for(quiz, next_role),
        next_page_route=next_role.page_route,
    )


async def find_active_by_step(session: AsyncSession, step_id: str) -> Optional[QuizSet]:
    stmt = (
        select(QuizSet)
        .where(
            or_(
                QuizSet.quiz_1_id == step_id,
                QuizSet.quiz_2_id == step_id,
                QuizSet.quiz_3_id == step_id,
                QuizSet.result_id == step_id,
            ),
            QuizSet.is_active.is_(True),
        )
        .limit(1)
    )
    return await session.scalar(stmt)


async def resolve_step(session: AsyncSession, step_id: str) -> StepView:
    quiz = await find_active_by_step(session, step_id)
    if quiz is None:
        logger.info("Step %s not found or inactive", step_id)
        raise NotFoundError("Quiz not found or inactive")
    return build_step_view(quiz, step_id)


async def list_active(session: AsyncSession) -> list[QuizSet]:
    rows = await session.execute(
        select(QuizSet)
        .where(QuizSet.is_active.is_(True))
        .order_by(QuizSet.created_at.desc(), QuizSet.id.desc())
    )
    return list(rows.scalars().all())
