from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from fincalc.models.base import Base


class QuizSet(Base):
    __tablename__ = "quiz_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quiz_name: Mapped[str] = mapped_column(String(200), nullable=False)

    # публичные идентификаторы шагов: по ним посетитель ходит по страницам
    quiz_1_id: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    quiz_2_id: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    quiz_3_id: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    result_id: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)

    question_1_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_1_placeholder: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    question_1_answer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    question_2_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_2_placeholder: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    question_2_answer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    question_3_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_3_placeholder: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    question_3_answer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    result_message: Mapped[str] = mapped_column(Text, nullable=False)
    reward_link: Mapped[str] = mapped_column(String(500), nullable=False)

    timer_duration: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    require_answer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
