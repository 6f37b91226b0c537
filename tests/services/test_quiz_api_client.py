import httpx
import pytest

from fincalc.services.quiz_api_client import AdminCredentials, QuizApiClient, QuizApiError


def _client(handler) -> QuizApiClient:
    return QuizApiClient("http://quiz.local/", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_step_hits_public_endpoint() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"success": True, "pageType": "emi", "nextStepId": "q2"})

    data = await _client(handler).fetch_step("q1_emi_1_a")

    assert seen["url"] == "http://quiz.local/api/quiz/q1_emi_1_a"
    assert seen["auth"] is None
    assert data["nextStepId"] == "q2"


@pytest.mark.asyncio
async def test_login_returns_credentials_used_by_admin_calls() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path, request.headers.get("Authorization")))
        if request.url.path == "/api/admin/login":
            return httpx.Response(200, json={"success": True, "token": "tok", "username": "admin"})
        if request.url.path.endswith("/toggle"):
            return httpx.Response(200, json={"success": True, "is_active": False})
        return httpx.Response(200, json={"success": True, "quizzes": [{"id": 1}]})

    client = _client(handler)
    credentials = await client.login("admin", "admin123")

    assert credentials == AdminCredentials(token="tok", username="admin")

    quizzes = await client.list_quiz_sets(credentials)
    toggled = await client.toggle_quiz_set(credentials, 1)

    assert quizzes == [{"id": 1}]
    assert toggled["is_active"] is False
    assert calls == [
        ("POST", "/api/admin/login", None),
        ("GET", "/api/admin/quizzes", "Bearer tok"),
        ("PATCH", "/api/admin/quiz/1/toggle", "Bearer tok"),
    ]


@pytest.mark.asyncio
async def test_error_carries_server_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"success": False, "message": "Quiz not found or inactive"})

    with pytest.raises(QuizApiError) as exc:
        await _client(handler).fetch_step("missing")

    assert exc.value.status_code == 404
    assert exc.value.message == "Quiz not found or inactive"


@pytest.mark.asyncio
async def test_error_without_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    with pytest.raises(QuizApiError) as exc:
        await _client(handler).fetch_active_quizzes()

    assert exc.value.status_code == 502
    assert exc.value.message == "Bad Gateway"
