"""HTTP-клиент к публичному и админскому API.

Токен админа не лежит в глобальном состоянии: login() возвращает
AdminCredentials, и их явно передают в каждый админский вызов.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx


@dataclass(frozen=True)
class AdminCredentials:
    token: str
    username: str

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class QuizApiError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class QuizApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        credentials: Optional[AdminCredentials] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        headers = credentials.headers() if credentials else {}
        async with httpx.AsyncClient(
            base_url=f"{self.base_url}/api",
            timeout=self.timeout,
            transport=self.transport,
        ) as c:
            r = await c.request(method, path, headers=headers, json=json)

        try:
            data = r.json()
        except ValueError:
            data = {}

        if r.is_error:
            message = data.get("message") if isinstance(data, dict) else None
            raise QuizApiError(r.status_code, message or r.reason_phrase or "API request failed")
        return data

    # --- публичные ---
    async def fetch_step(self, step_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/quiz/{step_id}")

    async def fetch_active_quizzes(self) -> list[dict[str, Any]]:
        data = await self._request("GET", "/quiz")
        return data.get("quizzes", [])

    # --- админские ---
    async def login(self, username: str, password: str) -> AdminCredentials:
        data = await self._request(
            "POST", "/admin/login", json={"username": username, "password": password}
        )
        return AdminCredentials(token=data["token"], username=data["username"])

    async def list_quiz_sets(self, credentials: AdminCredentials) -> list[dict[str, Any]]:
        data = await self._request("GET", "/admin/quizzes", credentials=credentials)
        return data.get("quizzes", [])

    async def get_quiz_set(self, credentials: AdminCredentials, quiz_id: int) -> dict[str, Any]:
        data = await self._request("GET", f"/admin/quiz/{quiz_id}", credentials=credentials)
        return data["quiz"]

    async def create_quiz_set(self, credentials: AdminCredentials, quiz: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/admin/quiz", credentials=credentials, json=quiz)

    async def update_quiz_set(
        self, credentials: AdminCredentials, quiz_id: int, quiz: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._request("PUT", f"/admin/quiz/{quiz_id}", credentials=credentials, json=quiz)

    async def delete_quiz_set(self, credentials: AdminCredentials, quiz_id: int) -> dict[str, Any]:
        return await self._request("DELETE", f"/admin/quiz/{quiz_id}", credentials=credentials)

    async def toggle_quiz_set(self, credentials: AdminCredentials, quiz_id: int) -> dict[str, Any]:
        return await self._request("PATCH", f"/admin/quiz/{quiz_id}/toggle", credentials=credentials)
