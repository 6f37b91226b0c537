import pytest
from fastapi.testclient import TestClient

from fincalc.core.db import get_session
from fincalc.core.security import create_jwt_token
from fincalc.main import app


async def _no_session():
    # сервисы в API-тестах подменяются через monkeypatch, база не нужна
    yield None


@pytest.fixture
def client():
    app.dependency_overrides[get_session] = _no_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_session, None)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = create_jwt_token({"sub": "1", "username": "admin"})
    return {"Authorization": f"Bearer {token}"}
