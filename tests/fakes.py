from __future__ import annotations

from typing import Any

from fincalc.models.quiz_set import QuizSet


def make_quiz_set(**overrides: Any) -> QuizSet:
    data: dict[str, Any] = dict(
        id=1,
        quiz_name="Diwali savings quiz",
        quiz_1_id="q1_emi_1700000000000_aaaaaa",
        quiz_2_id="q2_sip_1700000000000_bbbbbb",
        quiz_3_id="q3_swp_1700000000000_cccccc",
        result_id="res_1700000000000_dddddd",
        question_1_text="What does EMI stand for?",
        question_1_placeholder="Type your answer here...",
        question_1_answer="Equated monthly installment",
        question_2_text="What does SIP stand for?",
        question_2_placeholder="Three words",
        question_2_answer="Systematic investment plan",
        question_3_text="What does SWP stand for?",
        question_3_placeholder="Type your answer here...",
        question_3_answer="Systematic withdrawal plan",
        result_message="Well done!",
        reward_link="https://example.com/reward",
        timer_duration=30,
        require_answer=False,
        is_active=True,
    )
    data.update(overrides)
    return QuizSet(**data)


class FakeResult:
    def __init__(self, rows: list[Any]):
        self._rows = rows

    def scalar_one_or_none(self):
        return self._rows[0] if self._rows else None

    def scalars(self):
        return self

    def all(self):
        return list(self._rows)


class FakeSession:
    """Минимальная замена AsyncSession для сервисов."""

    def __init__(self, objects: list[Any] | None = None, execute_rows: list[Any] | None = None):
        self.objects = {o.id: o for o in objects or []}
        self.execute_rows = execute_rows or []
        self.added: list[Any] = []
        self.deleted: list[Any] = []
        self.commits = 0
        self.statements: list[Any] = []

    async def get(self, model, pk):
        return self.objects.get(pk)

    async def execute(self, stmt):
        self.statements.append(stmt)
        return FakeResult(self.execute_rows)

    async def scalar(self, stmt):
        self.statements.append(stmt)
        return self.execute_rows[0] if self.execute_rows else None

    def add(self, obj):
        if getattr(obj, "id", None) is None:
            obj.id = max(self.objects, default=0) + 1
        self.objects[obj.id] = obj
        self.added.append(obj)

    async def commit(self):
        self.commits += 1

    async def refresh(self, obj):
        return None

    async def delete(self, obj):
        self.objects.pop(obj.id, None)
        self.deleted.append(obj)
