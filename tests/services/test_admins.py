import pytest

from fincalc.core.errors import AuthError
from fincalc.core.security import decode_jwt_token, hash_password
from fincalc.models.admin_user import AdminUser
from fincalc.services import admins
from tests.fakes import FakeSession


def _admin() -> AdminUser:
    return AdminUser(id=1, username="admin", password_hash=hash_password("admin123"))


@pytest.mark.asyncio
async def test_authenticate_issues_token_and_records_login() -> None:
    admin = _admin()
    session = FakeSession(execute_rows=[admin])

    found, token = await admins.authenticate(session, "admin", "admin123")

    assert found is admin
    assert admin.last_login is not None
    assert session.commits == 1
    payload = decode_jwt_token(token)
    assert payload["sub"] == "1"
    assert payload["username"] == "admin"


@pytest.mark.asyncio
async def test_authenticate_wrong_password() -> None:
    session = FakeSession(execute_rows=[_admin()])
    with pytest.raises(AuthError) as exc:
        await admins.authenticate(session, "admin", "nope")
    assert exc.value.message == "Invalid credentials"
    assert session.commits == 0


@pytest.mark.asyncio
async def test_authenticate_unknown_user() -> None:
    with pytest.raises(AuthError):
        await admins.authenticate(FakeSession(), "ghost", "admin123")


@pytest.mark.asyncio
async def test_ensure_admin_creates_once() -> None:
    session = FakeSession()
    assert await admins.ensure_admin(session, "admin", "admin123") is True
    created = session.added[0]
    assert created.username == "admin"
    assert created.password_hash != "admin123"

    existing = FakeSession(execute_rows=[_admin()])
    assert await admins.ensure_admin(existing, "admin", "admin123") is False
    assert existing.added == []
