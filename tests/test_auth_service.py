import asyncio
import time

import pytest

from cityease_api.app.core.errors import AuthError, ConflictError, ValidationError
from cityease_api.app.core.db import get_connection
from cityease_api.app.core.security import decode_access_token
from cityease_api.app.services.auth_service import AuthService


@pytest.mark.asyncio
async def test_register_returns_user_without_hash_and_token(db_path):
    result = await AuthService.register("Asha", "asha@example.com", "secret123", None)

    assert result.user.email == "asha@example.com"
    assert result.user.phone == ""
    assert "password_hash" not in result.user.model_dump()
    payload = decode_access_token(result.token)
    assert payload["id"] == result.user.id
    assert payload["email"] == "asha@example.com"


@pytest.mark.asyncio
async def test_register_stores_bcrypt_hash(db_path):
    await AuthService.register("Asha", "asha@example.com", "secret123", "555")

    conn = get_connection()
    try:
        row = conn.execute("SELECT password_hash FROM users WHERE email = ?", ("asha@example.com",)).fetchone()
    finally:
        conn.close()
    assert row["password_hash"] != "secret123"
    assert row["password_hash"].startswith("$2b$10$")


@pytest.mark.asyncio
@pytest.mark.parametrize("email,password", [(None, "pw"), ("a@b.c", None), ("", "pw"), ("a@b.c", "")])
async def test_register_requires_email_and_password(db_path, email, password):
    with pytest.raises(ValidationError):
        await AuthService.register("Asha", email, password, None)


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(db_path):
    await AuthService.register("Asha", "asha@example.com", "secret123", None)
    with pytest.raises(ConflictError) as excinfo:
        await AuthService.register("Other", "asha@example.com", "different", None)
    assert excinfo.value.message == "Email already exists"


@pytest.mark.asyncio
async def test_login_with_correct_password(db_path):
    registered = await AuthService.register("Asha", "asha@example.com", "secret123", "555")
    result = await AuthService.login("asha@example.com", "secret123")

    assert result.user == registered.user
    assert decode_access_token(result.token)["id"] == registered.user.id


@pytest.mark.asyncio
async def test_login_with_wrong_password_fails(db_path):
    await AuthService.register("Asha", "asha@example.com", "secret123", None)
    with pytest.raises(AuthError) as excinfo:
        await AuthService.login("asha@example.com", "wrong")
    assert excinfo.value.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_unknown_email_fails(db_path):
    with pytest.raises(AuthError):
        await AuthService.login("nobody@example.com", "secret123")


@pytest.mark.asyncio
async def test_concurrent_registrations_keep_event_loop_responsive(db_path):
    gaps = []
    done = asyncio.Event()

    async def ticker():
        last = time.perf_counter()
        while not done.is_set():
            await asyncio.sleep(0.005)
            now = time.perf_counter()
            gaps.append(now - last)
            last = now

    tick_task = asyncio.create_task(ticker())
    await asyncio.sleep(0.01)
    results = await asyncio.gather(
        *(AuthService.register("User", f"user{i}@example.com", "secret123", None) for i in range(4))
    )
    done.set()
    await tick_task

    assert len({r.user.id for r in results}) == 4
    assert max(gaps) < 0.05


@pytest.mark.asyncio
async def test_login_runs_off_the_event_loop(db_path):
    await AuthService.register("Asha", "asha@example.com", "secret123", None)
    results = await asyncio.gather(
        AuthService.login("asha@example.com", "secret123"),
        AuthService.login("asha@example.com", "secret123"),
    )
    assert all(r.user.email == "asha@example.com" for r in results)
