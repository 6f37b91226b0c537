"""Обратный отсчёт на странице вопроса и кнопка «Далее».

Таймер идёт RUNNING -> EXPIRED один раз за загрузку страницы. Кнопка
доступна только после истечения таймера и, если require_answer, при
непустом ответе.
"""
from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class TimerState(str, Enum):
    RUNNING = "running"
    EXPIRED = "expired"


def urgency_for(seconds_remaining: int) -> str:
    if seconds_remaining > 15:
        return "calm"
    if seconds_remaining > 5:
        return "warning"
    return "urgent"


class QuizTimer:
    def __init__(
        self,
        duration: int,
        on_tick: Optional[Callable[[int], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
    ):
        self.duration = duration
        self.time_left = duration
        self.on_tick = on_tick
        self.on_complete = on_complete
        self.state = TimerState.RUNNING
        self._task: Optional[asyncio.Task] = None

    @property
    def expired(self) -> bool:
        return self.state is TimerState.EXPIRED

    @property
    def urgency(self) -> str:
        return urgency_for(self.time_left)

    @property
    def formatted(self) -> str:
        minutes, seconds = divmod(max(self.time_left, 0), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def _expire(self) -> None:
        if self.expired:
            return
        self.state = TimerState.EXPIRED
        if self.on_complete:
            self.on_complete()

    def tick(self) -> None:
        """Одна секунда. После истечения ничего не делает."""
        if self.expired:
            return
        if self.time_left <= 0:
            # таймер с нулевой длительностью: истекает без отрицательного тика
            self.time_left = 0
            self._expire()
            return

        self.time_left -= 1
        if self.on_tick:
            self.on_tick(self.time_left)

        if self.time_left <= 0:
            self.time_left = 0
            self._expire()

    async def run(self, interval: float = 1.0) -> None:
        if self.time_left <= 0:
            self.time_left = 0
            self._expire()
            return
        while not self.expired:
            await asyncio.sleep(interval)
            self.tick()

    def start(self, interval: float = 1.0) -> asyncio.Task:
        """Запускает отсчёт фоновой задачей в текущем event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self.run(interval))
        return self._task

    def stop(self) -> None:
        # отменяет отсчёт; состояние таймера не меняется
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None


class AdvanceGate:
    """Доступность кнопки «Далее»: пересчитывается при каждом чтении."""

    def __init__(self, timer: QuizTimer, require_answer: bool = False):
        self.timer = timer
        self.require_answer = require_answer
        self.answer = ""

    def update_answer(self, text: Optional[str]) -> bool:
        self.answer = text or ""
        return self.enabled

    @property
    def enabled(self) -> bool:
        if not self.timer.expired:
            return False
        if self.require_answer and not self.answer.strip():
            return False
        return True
