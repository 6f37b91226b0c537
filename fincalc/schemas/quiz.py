from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from fincalc.core.config import settings


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
PageType = Literal["emi", "sip", "swp", "results"]


class StepView(BaseModel):
    """То, что видит страница калькулятора по своему quizid.

    Поля вопроса и поля результата взаимоисключающие: для ответа
    используется response_model_exclude_none.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    quiz_name: str
    timer_duration: int
    require_answer: bool
    page_type: PageType

    # слоты 1..3
    question_text: Optional[str] = None
    placeholder: Optional[str] = None
    next_step_id: Optional[str] = None
    next_page_route: Optional[str] = None

    # результат
    result_message: Optional[str] = None
    reward_link: Optional[str] = None


class QuizSetSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    quiz_name: str
    quiz_1_id: str
    quiz_2_id: str
    quiz_3_id: str
    result_id: str
    is_active: bool
    created_at: Optional[datetime] = None


class QuizSetOut(QuizSetSummary):
    question_1_text: str
    question_1_placeholder: Optional[str] = None
    question_1_answer: Optional[str] = None
    question_2_text: str
    question_2_placeholder: Optional[str] = None
    question_2_answer: Optional[str] = None
    question_3_text: str
    question_3_placeholder: Optional[str] = None
    question_3_answer: Optional[str] = None
    result_message: str
    reward_link: str
    timer_duration: int
    require_answer: bool
    updated_at: Optional[datetime] = None


class QuizSetIn(BaseModel):
    quiz_name: RequiredText = Field(..., max_length=200)

    question_1_text: RequiredText
    question_1_placeholder: Optional[str] = None
    # ожидаемые ответы только хранятся, ответы посетителя с ними не сверяются
    question_1_answer: Optional[str] = None

    question_2_text: RequiredText
    question_2_placeholder: Optional[str] = None
    question_2_answer: Optional[str] = None

    question_3_text: RequiredText
    question_3_placeholder: Optional[str] = None
    question_3_answer: Optional[str] = None

    result_message: RequiredText
    reward_link: RequiredText = Field(..., max_length=500)

    timer_duration: Optional[int] = Field(default=None, ge=0, validate_default=True)
    require_answer: bool = False

    @field_validator("timer_duration")
    @classmethod
    def default_timer(cls, v: Optional[int]) -> int:
        # 0 и null -> таймер по умолчанию
        return v or settings.DEFAULT_TIMER_SECONDS

    @field_validator("reward_link")
    @classmethod
    def check_reward_link(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return v

    def placeholders(self) -> dict[str, str]:
        default = settings.DEFAULT_PLACEHOLDER
        return {
            "question_1_placeholder": self.question_1_placeholder or default,
            "question_2_placeholder": self.question_2_placeholder or default,
            "question_3_placeholder": self.question_3_placeholder or default,
        }


class QuizSetUpdate(QuizSetIn):
    # полное обновление: флаг публикации передаётся явно
    is_active: bool
